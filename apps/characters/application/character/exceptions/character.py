"""Character application exceptions."""

from __future__ import annotations

from uuid import UUID

from apps.characters.application.common.exceptions.base import ApplicationError


class CharacterNotFoundError(ApplicationError):
    """ID 또는 이름으로 캐릭터를 찾을 수 없을 때 발생하는 예외."""

    def __init__(self, *, character_id: UUID | None = None, name: str | None = None) -> None:
        self.character_id = character_id
        self.name = name
        if name is not None:
            super().__init__(f"Character with name {name} not found")
        else:
            super().__init__(f"Character with ID {character_id} not found")


class DuplicateCharacterNameError(ApplicationError):
    """이름 고유성 제약을 위반하는 생성/수정 시 발생하는 예외."""

    def __init__(self, name: str | None = None) -> None:
        self.name = name
        super().__init__("Character with this name already exists")
