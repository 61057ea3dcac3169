"""Database Setup."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.characters.infrastructure.persistence_postgres import metadata
from apps.characters.setup.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# SQLAlchemy Engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_size=10,
    max_overflow=20,
    pool_pre_ping=True,
)

# Session Factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def sync_schema(target: AsyncEngine = engine) -> None:
    """누락된 테이블을 생성합니다 (개발 환경용 스키마 동기화)."""
    async with target.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema synchronized")


async def dispose_engine() -> None:
    """커넥션 풀을 정리합니다."""
    await engine.dispose()

