"""Characters Service Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Characters 서비스 설정.

    기존 배포 환경 변수(DB_HOST, DB_USERNAME, NODE_ENV 등)도 함께 인식합니다.
    """

    # Service
    app_name: str = "Characters API"
    app_version: str = "1.0.0"
    service_name: str = "characters-api"
    environment: str = Field(
        "development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV", "CHARACTERS_ENVIRONMENT"),
    )
    log_level: str | None = Field(
        None,
        validation_alias=AliasChoices("LOG_LEVEL", "CHARACTERS_LOG_LEVEL"),
        description="Root log level (defaults to DEBUG in development)",
    )
    cors_origins: list[str] = Field(["*"], description="Allowed CORS origins")

    # Database
    postgres_host: str = Field(
        "localhost",
        validation_alias=AliasChoices("DB_HOST", "POSTGRES_HOST"),
    )
    postgres_port: int = Field(
        5432,
        validation_alias=AliasChoices("DB_PORT", "POSTGRES_PORT"),
    )
    postgres_user: str = Field(
        "postgres",
        validation_alias=AliasChoices("DB_USERNAME", "POSTGRES_USER"),
    )
    postgres_password: str = Field(
        "postgres",
        validation_alias=AliasChoices("DB_PASSWORD", "POSTGRES_PASSWORD"),
    )
    postgres_db: str = Field(
        "starwars",
        validation_alias=AliasChoices("DB_DATABASE", "POSTGRES_DB"),
    )
    database_url_override: str | None = Field(
        None,
        validation_alias=AliasChoices("DATABASE_URL", "CHARACTERS_DATABASE_URL"),
        description="Full async database URL, overrides the DB_* settings",
    )
    database_echo: bool = Field(False, description="Echo SQL statements")
    schema_sync: bool | None = Field(
        None,
        description="Create missing tables on startup (defaults to on outside production)",
    )

    # OpenTelemetry
    otel_enabled: bool = Field(False, validation_alias=AliasChoices("OTEL_ENABLED"))
    otel_exporter_otlp_endpoint: str = Field(
        "http://localhost:4317",
        validation_alias=AliasChoices("OTEL_EXPORTER_OTLP_ENDPOINT"),
    )
    otel_sampling_rate: float = Field(1.0, validation_alias=AliasChoices("OTEL_SAMPLING_RATE"))

    model_config = SettingsConfigDict(
        env_prefix="CHARACTERS_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """운영 환경 여부."""
        return self.environment.lower() in ("production", "prod")

    @property
    def database_url(self) -> str:
        """PostgreSQL 연결 URL (asyncpg)."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def should_sync_schema(self) -> bool:
        """시작 시 스키마 동기화 여부."""
        if self.schema_sync is not None:
            return self.schema_sync
        return not self.is_production

    @property
    def effective_log_level(self) -> str:
        """적용할 로그 레벨."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.environment.lower() in ("development", "local") else "INFO"


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스를 반환합니다."""
    return Settings()
