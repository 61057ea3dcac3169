"""Domain Entities."""

from apps.characters.domain.entities.character import Character

__all__ = ["Character"]
