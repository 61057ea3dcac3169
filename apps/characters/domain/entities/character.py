"""Character Entity.

캐릭터 카탈로그 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from apps.characters.domain.enums import Episode


@dataclass
class Character:
    """캐릭터 엔티티.

    행위 없는 순수 데이터 레코드입니다. 테이블 매핑(고유 이름 제약,
    ID 생성, 타임스탬프 관리)은 persistence 계층이 소유합니다.

    Attributes:
        name: 캐릭터 이름 (unique)
        episodes: 등장 에피소드 (순서/중복 보존)
        planet: 출신 행성 (None이면 미상)
        species: 종족
        affiliation: 소속
        id: 캐릭터 고유 ID (저장 시 생성)
        created_at: 생성 시각
        updated_at: 수정 시각
    """

    name: str
    episodes: list[Episode] = field(default_factory=list)
    planet: str | None = None
    species: str | None = None
    affiliation: str | None = None
    id: UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
