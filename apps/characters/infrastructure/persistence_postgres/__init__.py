"""PostgreSQL Persistence.

Imperative Mapping을 사용하여 도메인 엔티티를 직접 저장/조회합니다.
"""

from apps.characters.infrastructure.persistence_postgres.adapters import (
    SqlaCharacterGateway,
)
from apps.characters.infrastructure.persistence_postgres.mappings import start_mappers
from apps.characters.infrastructure.persistence_postgres.registry import metadata

__all__ = ["SqlaCharacterGateway", "metadata", "start_mappers"]
