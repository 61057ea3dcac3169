"""ORM Mappings.

Imperative Mapping을 사용하여 도메인 엔티티를 테이블에 매핑합니다.
도메인 엔티티는 SQLAlchemy에 의존하지 않습니다.
"""

from apps.characters.domain.entities import Character
from apps.characters.infrastructure.persistence_postgres.registry import mapper_registry
from apps.characters.infrastructure.persistence_postgres.tables import characters_table


def start_character_mapper() -> None:
    """Character 엔티티 매퍼 시작."""
    if hasattr(Character, "__mapper__"):
        return

    mapper_registry.map_imperatively(
        Character,
        characters_table,
        properties={
            "id": characters_table.c.id,
            "name": characters_table.c.name,
            "episodes": characters_table.c.episodes,
            "planet": characters_table.c.planet,
            "species": characters_table.c.species,
            "affiliation": characters_table.c.affiliation,
            "created_at": characters_table.c.created_at,
            "updated_at": characters_table.c.updated_at,
        },
    )


def start_mappers() -> None:
    """모든 매퍼 시작.

    앱 부팅 시 한 번만 호출됩니다.
    """
    start_character_mapper()


__all__ = ["start_mappers", "start_character_mapper"]
