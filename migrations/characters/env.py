"""Alembic Environment Configuration for Characters.

- 환경변수(DATABASE_URL 또는 DB_*)에서 DB URL 로드
- autogenerate 지원 (characters 테이블 메타데이터)

Usage:
    cd migrations/characters
    alembic upgrade head
    alembic revision --autogenerate -m "add new column"
    alembic downgrade -1
"""

import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

# 프로젝트 루트를 path에 추가 (메타데이터 import용)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
sys.path.insert(0, PROJECT_ROOT)

from apps.characters.infrastructure.persistence_postgres import metadata  # noqa: E402
from apps.characters.setup.config import get_settings  # noqa: E402

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = metadata

# asyncpg URL을 psycopg2로 변환 (Alembic은 동기 드라이버 사용)
DATABASE_URL = get_settings().database_url.replace("postgresql+asyncpg://", "postgresql://")


def get_url() -> str:
    """DB URL 반환."""
    return DATABASE_URL


def run_migrations_offline() -> None:
    """오프라인 모드에서 마이그레이션 실행.

    DB 연결 없이 SQL만 생성합니다.
    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """온라인 모드에서 마이그레이션 실행."""
    connectable = create_engine(get_url(), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            compare_server_default=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
