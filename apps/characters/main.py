"""Characters API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.characters.infrastructure.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from apps.characters.infrastructure.persistence_postgres import start_mappers
from apps.characters.presentation.http.controllers import (
    characters_router,
    health_router,
)
from apps.characters.presentation.http.errors import register_exception_handlers
from apps.characters.setup.config import get_settings
from apps.characters.setup.database import dispose_engine, engine, sync_schema
from apps.characters.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.effective_log_level)
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    # ORM 매퍼 초기화 (Imperative Mapping)
    start_mappers()
    logger.info("ORM mappers initialized")

    if setup_tracing(settings):
        instrument_sqlalchemy(engine, settings)

    # 운영 환경이 아니면 스키마 자동 동기화 (운영은 Alembic 마이그레이션 사용)
    if settings.should_sync_schema:
        await sync_schema()

    yield

    logger.info(f"Shutting down {settings.app_name}")
    shutdown_tracing()
    await dispose_engine()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Star Wars character catalog CRUD API",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app, settings)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(characters_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.characters.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
