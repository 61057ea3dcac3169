"""Common DTOs."""

from apps.characters.application.common.dto.page import Page

__all__ = ["Page"]
