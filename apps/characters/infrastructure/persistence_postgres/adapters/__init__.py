"""SQLAlchemy adapters."""

from apps.characters.infrastructure.persistence_postgres.adapters.character_gateway_sqla import (
    SqlaCharacterGateway,
)

__all__ = ["SqlaCharacterGateway"]
