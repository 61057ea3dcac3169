"""Character DTOs."""

from apps.characters.application.character.dto.character import (
    UNSET,
    CharacterCreate,
    CharacterUpdate,
)

__all__ = ["UNSET", "CharacterCreate", "CharacterUpdate"]
