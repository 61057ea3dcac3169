"""Pytest configuration for characters tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Any, Sequence
from uuid import UUID, uuid4

import pytest

from apps.characters.application.character.dto import CharacterCreate
from apps.characters.application.character.ports import (
    CharacterGateway,
    UniqueConstraintViolationError,
)
from apps.characters.domain.entities import Character
from apps.characters.domain.enums import Episode

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemoryCharacterGateway(CharacterGateway):
    """테스트용 인메모리 게이트웨이.

    이름 고유 제약, ID 생성, 타임스탬프 갱신을 저장소처럼 흉내냅니다.
    조회 결과는 복사본이므로 persist 전 변경은 저장소에 반영되지 않습니다.
    """

    def __init__(self) -> None:
        self.rows: dict[UUID, Character] = {}
        self._ticks = count(1)

    def _now(self) -> datetime:
        return BASE_TIME + timedelta(seconds=next(self._ticks))

    @staticmethod
    def _copy(character: Character) -> Character:
        return replace(character, episodes=list(character.episodes))

    def create_transient(self, data: CharacterCreate) -> Character:
        return Character(
            name=data.name,
            episodes=list(data.episodes),
            planet=data.planet,
            species=data.species,
            affiliation=data.affiliation,
        )

    async def persist(self, character: Character) -> Character:
        for row in self.rows.values():
            if row.name == character.name and row.id != character.id:
                raise UniqueConstraintViolationError("uq_characters_name")

        now = self._now()
        if character.id is None:
            character.id = uuid4()
            character.created_at = now
        character.updated_at = now
        self.rows[character.id] = self._copy(character)
        return character

    async def persist_many(self, characters: Sequence[Character]) -> Sequence[Character]:
        for character in characters:
            await self.persist(character)
        return characters

    async def find_one_by(self, **criteria: Any) -> Character | None:
        for row in self.rows.values():
            if all(getattr(row, key) == value for key, value in criteria.items()):
                return self._copy(row)
        return None

    async def find_page(
        self,
        skip: int,
        take: int,
        newest_first: bool = True,
    ) -> tuple[Sequence[Character], int]:
        ordered = sorted(
            self.rows.values(),
            key=lambda c: (c.created_at, c.id),
            reverse=newest_first,
        )
        return [self._copy(c) for c in ordered[skip : skip + take]], len(ordered)

    async def remove(self, character: Character) -> None:
        del self.rows[character.id]

    async def count_all(self) -> int:
        return len(self.rows)


@pytest.fixture
def memory_gateway() -> InMemoryCharacterGateway:
    """인메모리 게이트웨이."""
    return InMemoryCharacterGateway()


@pytest.fixture
def luke_input() -> CharacterCreate:
    """Luke Skywalker 생성 입력."""
    return CharacterCreate(
        name="Luke Skywalker",
        episodes=[Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI],
        planet="Tatooine",
        species="Human",
        affiliation="Rebel Alliance",
    )


@pytest.fixture
def sample_character() -> Character:
    """저장된 상태의 테스트용 캐릭터."""
    now = datetime.now(timezone.utc)
    return Character(
        id=uuid4(),
        name="Luke Skywalker",
        episodes=[Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI],
        planet="Tatooine",
        species="Human",
        affiliation="Rebel Alliance",
        created_at=now,
        updated_at=now,
    )
