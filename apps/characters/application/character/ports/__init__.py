"""Character Ports."""

from apps.characters.application.character.ports.character_gateway import (
    CharacterGateway,
    UniqueConstraintViolationError,
)

__all__ = ["CharacterGateway", "UniqueConstraintViolationError"]
