"""Character Domain Enums."""

from enum import Enum


class Episode(str, Enum):
    """캐릭터가 등장하는 에피소드."""

    NEWHOPE = "NEWHOPE"
    EMPIRE = "EMPIRE"
    JEDI = "JEDI"
    PHANTOM = "PHANTOM"
    CLONES = "CLONES"
    SITH = "SITH"
    AWAKENS = "AWAKENS"
    LAST_JEDI = "LAST_JEDI"
    RISE_SKYWALKER = "RISE_SKYWALKER"
