"""Domain Enums."""

from apps.characters.domain.enums.episode import Episode

__all__ = ["Episode"]
