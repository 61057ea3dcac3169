"""Character exceptions."""

from apps.characters.application.character.exceptions.character import (
    CharacterNotFoundError,
    DuplicateCharacterNameError,
)

__all__ = ["CharacterNotFoundError", "DuplicateCharacterNameError"]
