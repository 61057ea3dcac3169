"""HTTP Schemas."""

from apps.characters.presentation.http.schemas.character import (
    CharacterCreateRequest,
    CharacterResponse,
    CharacterUpdateRequest,
    PaginatedCharactersResponse,
)

__all__ = [
    "CharacterCreateRequest",
    "CharacterResponse",
    "CharacterUpdateRequest",
    "PaginatedCharactersResponse",
]
