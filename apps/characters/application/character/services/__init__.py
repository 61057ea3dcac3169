"""Character Services."""

from apps.characters.application.character.services.character_service import (
    CharacterService,
)
from apps.characters.application.character.services.roster import SEED_ROSTER

__all__ = ["CharacterService", "SEED_ROSTER"]
