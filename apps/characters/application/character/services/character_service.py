"""CharacterService.

게이트웨이와 페이지 계산기를 조합해 캐릭터 유스케이스를 구현합니다.
서비스 자체는 상태를 갖지 않으며 모든 상태는 게이트웨이 뒤 저장소에 있습니다.
"""

from __future__ import annotations

import logging
from uuid import UUID

from apps.characters.application.character.dto import CharacterCreate, CharacterUpdate
from apps.characters.application.character.exceptions import (
    CharacterNotFoundError,
    DuplicateCharacterNameError,
)
from apps.characters.application.character.ports import (
    CharacterGateway,
    UniqueConstraintViolationError,
)
from apps.characters.application.character.services.roster import SEED_ROSTER
from apps.characters.application.common.dto import Page
from apps.characters.application.common.pagination import paginate
from apps.characters.domain.entities import Character

logger = logging.getLogger(__name__)


class CharacterService:
    """캐릭터 도메인 서비스.

    입력 형태 검증은 transport 계층의 책임이며, 서비스는 입력을 신뢰합니다.
    """

    def __init__(self, gateway: CharacterGateway) -> None:
        """Initialize.

        Args:
            gateway: 캐릭터 저장소 게이트웨이
        """
        self._gateway = gateway

    async def create(self, data: CharacterCreate) -> Character:
        """캐릭터를 생성합니다.

        이름 중복은 사전 조회하지 않고 저장소의 고유 제약 위반으로 판단합니다.

        Raises:
            DuplicateCharacterNameError: 같은 이름의 캐릭터가 이미 존재
        """
        character = self._gateway.create_transient(data)
        try:
            created = await self._gateway.persist(character)
        except UniqueConstraintViolationError as e:
            raise DuplicateCharacterNameError(data.name) from e

        logger.info("Character created", extra={"character_id": str(created.id)})
        return created

    async def find_all(self, page: int = 1, limit: int = 10) -> Page[Character]:
        """created_at 내림차순으로 한 페이지를 조회합니다.

        Args:
            page: 페이지 번호 (1 이상)
            limit: 페이지 크기 (1 이상)

        Returns:
            페이지 메타데이터가 포함된 결과
        """
        skip = (page - 1) * limit
        characters, total = await self._gateway.find_page(skip, limit, newest_first=True)
        return paginate(list(characters), total, page, limit)

    async def find_one(self, character_id: UUID) -> Character:
        """ID로 캐릭터를 조회합니다.

        Raises:
            CharacterNotFoundError: 캐릭터가 없음
        """
        character = await self._gateway.find_one_by(id=character_id)
        if character is None:
            raise CharacterNotFoundError(character_id=character_id)
        return character

    async def find_by_name(self, name: str) -> Character:
        """이름으로 캐릭터를 조회합니다.

        Raises:
            CharacterNotFoundError: 캐릭터가 없음
        """
        character = await self._gateway.find_one_by(name=name)
        if character is None:
            raise CharacterNotFoundError(name=name)
        return character

    async def update(self, character_id: UUID, data: CharacterUpdate) -> Character:
        """전달된 필드만 기존 레코드에 덮어씁니다 (merge, not replace).

        Raises:
            CharacterNotFoundError: 캐릭터가 없음
            DuplicateCharacterNameError: 변경할 이름이 다른 캐릭터와 충돌
        """
        character = await self.find_one(character_id)

        changes = data.changes()
        for field_name, value in changes.items():
            setattr(character, field_name, list(value) if field_name == "episodes" else value)

        try:
            updated = await self._gateway.persist(character)
        except UniqueConstraintViolationError as e:
            raise DuplicateCharacterNameError(changes.get("name")) from e

        logger.info(
            "Character updated",
            extra={"character_id": str(character_id), "fields": sorted(changes)},
        )
        return updated

    async def remove(self, character_id: UUID) -> None:
        """캐릭터를 삭제합니다.

        Raises:
            CharacterNotFoundError: 캐릭터가 없음
        """
        character = await self.find_one(character_id)
        await self._gateway.remove(character)
        logger.info("Character deleted", extra={"character_id": str(character_id)})

    async def seed(self) -> list[Character]:
        """저장소가 비어 있을 때만 고정 로스터를 일괄 저장합니다.

        정책:
        - 레코드가 하나라도 있으면 아무것도 하지 않고 빈 목록 반환
        - 이름별 중복 확인은 하지 않음 (개체 단위가 아닌 모집단 단위 게이트)

        Returns:
            저장된 캐릭터 목록 (이미 데이터가 있으면 빈 목록)
        """
        existing = await self._gateway.count_all()
        if existing > 0:
            logger.info("Characters already exist, skipping seed", extra={"count": existing})
            return []

        characters = [self._gateway.create_transient(entry) for entry in SEED_ROSTER]
        seeded = list(await self._gateway.persist_many(characters))
        logger.info("Seeded characters", extra={"count": len(seeded)})
        return seeded
