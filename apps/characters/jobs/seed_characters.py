"""Seed the character catalog.

HTTP 서버 없이 빈 저장소에 기본 캐릭터를 채웁니다.

Usage:
    python -m apps.characters.jobs.seed_characters
    python -m apps.characters.jobs.seed_characters --database-url postgresql+asyncpg://... --create-tables
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from apps.characters.application.character.services import CharacterService
from apps.characters.infrastructure.persistence_postgres import (
    SqlaCharacterGateway,
    metadata,
    start_mappers,
)
from apps.characters.setup.config import get_settings
from apps.characters.setup.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the characters table when it is empty",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--database-url",
        help="Override DATABASE_URL / DB_* settings",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding",
    )
    return parser.parse_args(argv)


async def run_seed(database_url: str, create_tables: bool = False) -> int:
    """시드를 실행하고 저장된 캐릭터 수를 반환합니다."""
    start_mappers()
    engine = create_async_engine(database_url, echo=False, pool_pre_ping=True)
    try:
        if create_tables:
            async with engine.begin() as conn:
                await conn.run_sync(metadata.create_all)

        session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        async with session_factory() as session:
            service = CharacterService(SqlaCharacterGateway(session))
            seeded = await service.seed()
    finally:
        await engine.dispose()

    return len(seeded)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.effective_log_level)

    database_url = args.database_url or settings.database_url
    try:
        count = asyncio.run(run_seed(database_url, create_tables=args.create_tables))
    except Exception:
        logger.exception("Error running seeds")
        return 1

    if count:
        logger.info(f"Seeded {count} characters successfully")
    else:
        logger.info("Characters already exist, nothing seeded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
