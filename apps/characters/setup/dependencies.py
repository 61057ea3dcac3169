"""Dependency Injection for FastAPI."""

from __future__ import annotations

from typing import Annotated, AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apps.characters.application.character.ports import CharacterGateway
from apps.characters.application.character.services import CharacterService
from apps.characters.infrastructure.persistence_postgres import SqlaCharacterGateway
from apps.characters.setup.database import async_session_factory


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """요청 단위 DB 세션을 주입합니다."""
    async with async_session_factory() as session:
        yield session


# Type alias for dependency injection
SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


def get_character_gateway(session: SessionDep) -> CharacterGateway:
    """CharacterGateway를 주입합니다."""
    return SqlaCharacterGateway(session)


def get_character_service(
    gateway: Annotated[CharacterGateway, Depends(get_character_gateway)],
) -> CharacterService:
    """CharacterService를 주입합니다."""
    return CharacterService(gateway)
