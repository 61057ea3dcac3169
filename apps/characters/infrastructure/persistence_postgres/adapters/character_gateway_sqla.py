"""SQLAlchemy Character Gateway Implementation."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.characters.application.character.dto import CharacterCreate
from apps.characters.application.character.ports import (
    CharacterGateway,
    UniqueConstraintViolationError,
)
from apps.characters.domain.entities import Character
from apps.characters.infrastructure.persistence_postgres.errors import (
    is_unique_violation,
    violated_constraint,
)
from apps.characters.infrastructure.persistence_postgres.tables import characters_table


class SqlaCharacterGateway(CharacterGateway):
    """SQLAlchemy 기반 캐릭터 게이트웨이.

    persist/remove는 커밋까지 수행하여 작업 단위를 저장소 경계에서 끝냅니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    def create_transient(self, data: CharacterCreate) -> Character:
        """저장 전 캐릭터를 생성합니다."""
        return Character(
            name=data.name,
            episodes=list(data.episodes),
            planet=data.planet,
            species=data.species,
            affiliation=data.affiliation,
        )

    async def persist(self, character: Character) -> Character:
        """캐릭터를 저장하고 생성 값(id, 타임스탬프)을 다시 읽어옵니다."""
        self._session.add(character)
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if is_unique_violation(e):
                raise UniqueConstraintViolationError(violated_constraint(e)) from e
            raise

        await self._session.refresh(character)
        return character

    async def persist_many(self, characters: Sequence[Character]) -> Sequence[Character]:
        """캐릭터 목록을 한 트랜잭션으로 저장합니다."""
        self._session.add_all(characters)
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

        for character in characters:
            await self._session.refresh(character)
        return characters

    async def find_one_by(self, **criteria: Any) -> Character | None:
        """단일 필드 정확 일치로 조회합니다."""
        stmt = select(Character).filter_by(**criteria)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_page(
        self,
        skip: int,
        take: int,
        newest_first: bool = True,
    ) -> tuple[Sequence[Character], int]:
        """한 페이지와 전체 개수를 조회합니다."""
        columns = (characters_table.c.created_at, characters_table.c.id)
        # 같은 시각에 저장된 레코드는 id로 순서 고정
        order = [c.desc() if newest_first else c.asc() for c in columns]
        stmt = select(Character).order_by(*order).offset(skip).limit(take)
        result = await self._session.execute(stmt)
        characters = result.scalars().all()

        total = await self.count_all()
        return characters, total

    async def remove(self, character: Character) -> None:
        """캐릭터를 삭제합니다."""
        await self._session.delete(character)
        await self._session.commit()

    async def count_all(self) -> int:
        """전체 캐릭터 수를 조회합니다."""
        stmt = select(func.count()).select_from(characters_table)
        result = await self._session.execute(stmt)
        return result.scalar_one()
