"""Seed Roster.

빈 저장소에 한 번만 채워 넣는 고정 캐릭터 목록입니다.
"""

from apps.characters.application.character.dto import CharacterCreate
from apps.characters.domain.enums import Episode

_ORIGINAL_TRILOGY = (Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI)

SEED_ROSTER: tuple[CharacterCreate, ...] = (
    CharacterCreate(
        name="Luke Skywalker",
        episodes=_ORIGINAL_TRILOGY,
        planet="Tatooine",
        species="Human",
        affiliation="Rebel Alliance",
    ),
    CharacterCreate(
        name="Darth Vader",
        episodes=_ORIGINAL_TRILOGY,
        planet="Tatooine",
        species="Human",
        affiliation="Galactic Empire",
    ),
    CharacterCreate(
        name="Han Solo",
        episodes=_ORIGINAL_TRILOGY,
        planet="Corellia",
        species="Human",
        affiliation="Rebel Alliance",
    ),
    CharacterCreate(
        name="Leia Organa",
        episodes=_ORIGINAL_TRILOGY,
        planet="Alderaan",
        species="Human",
        affiliation="Rebel Alliance",
    ),
    CharacterCreate(
        name="Wilhuff Tarkin",
        episodes=(Episode.NEWHOPE,),
        planet="Eriadu",
        species="Human",
        affiliation="Galactic Empire",
    ),
    CharacterCreate(
        name="C-3PO",
        episodes=_ORIGINAL_TRILOGY,
        planet="Tatooine",
        species="Droid",
        affiliation="Rebel Alliance",
    ),
    CharacterCreate(
        name="R2-D2",
        episodes=_ORIGINAL_TRILOGY,
        planet="Naboo",
        species="Droid",
        affiliation="Rebel Alliance",
    ),
)
