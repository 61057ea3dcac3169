"""Table Definitions.

Character 도메인의 SQLAlchemy Table 정의.
고유 이름 제약, ID 생성, 타임스탬프 자동 관리는 엔티티가 아닌 이 스키마가 소유합니다.
"""

from uuid import uuid4

from sqlalchemy import Column, DateTime, Enum, Index, Table, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.sql import func

from apps.characters.domain.enums import Episode
from apps.characters.infrastructure.persistence_postgres.registry import mapper_registry

CHARACTER_NAME_CONSTRAINT = "uq_characters_name"

characters_table = Table(
    "characters",
    mapper_registry.metadata,
    Column("id", UUID(as_uuid=True), primary_key=True, default=uuid4),
    Column("name", Text, nullable=False),
    # Episode 값 (순서/중복 보존), VARCHAR(32) 배열로 저장
    Column(
        "episodes",
        ARRAY(Enum(Episode, native_enum=False, length=32)),
        nullable=False,
        server_default="{}",
    ),
    Column("planet", Text, nullable=True),
    Column("species", Text, nullable=True),
    Column("affiliation", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
    UniqueConstraint("name", name=CHARACTER_NAME_CONSTRAINT),
    Index("ix_characters_created_at", "created_at"),
)
