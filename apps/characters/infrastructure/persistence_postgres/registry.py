"""Mapper Registry.

characters 테이블 메타데이터와 Imperative Mapping 레지스트리.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

metadata = MetaData()
mapper_registry = registry(metadata=metadata)
