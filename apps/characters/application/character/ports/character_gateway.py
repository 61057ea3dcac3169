"""Character Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from apps.characters.application.character.dto import CharacterCreate
from apps.characters.domain.entities import Character


class UniqueConstraintViolationError(Exception):
    """저장 시 고유 제약(이름)이 위반되었음을 알리는 포트 예외."""

    def __init__(self, constraint: str | None = None) -> None:
        self.constraint = constraint
        super().__init__(f"Unique constraint violated: {constraint or 'unknown'}")


class CharacterGateway(ABC):
    """캐릭터 저장소 포트.

    저장 기술과 무관한 영속성 계약입니다.
    인프라스트럭처 계층에서 구현됩니다.
    """

    @abstractmethod
    def create_transient(self, data: CharacterCreate) -> Character:
        """저장되지 않은 후보 레코드를 만듭니다.

        레코드 형태 외의 기본값은 적용하지 않습니다.

        Args:
            data: 생성 입력

        Returns:
            저장 전 캐릭터 (id, 타임스탬프 없음)
        """
        ...

    @abstractmethod
    async def persist(self, character: Character) -> Character:
        """레코드 하나를 영구 저장합니다 (insert 또는 identity 기준 overwrite).

        Args:
            character: 저장할 캐릭터

        Returns:
            생성된 id와 타임스탬프가 채워진 캐릭터

        Raises:
            UniqueConstraintViolationError: 같은 이름의 다른 레코드가 존재
        """
        ...

    @abstractmethod
    async def persist_many(self, characters: Sequence[Character]) -> Sequence[Character]:
        """여러 레코드를 한 번에 저장합니다.

        레코드별 제약 위반 변환은 하지 않으며 저장소 오류는 그대로 전파됩니다.
        """
        ...

    @abstractmethod
    async def find_one_by(self, **criteria: Any) -> Character | None:
        """단일 필드(id 또는 name) 정확 일치로 최대 한 건을 조회합니다."""
        ...

    @abstractmethod
    async def find_page(
        self,
        skip: int,
        take: int,
        newest_first: bool = True,
    ) -> tuple[Sequence[Character], int]:
        """한 페이지와 페이징 무관 전체 개수를 반환합니다.

        Args:
            skip: 건너뛸 레코드 수
            take: 가져올 레코드 수
            newest_first: created_at 내림차순 정렬 여부

        Returns:
            (페이지 레코드, 전체 개수)
        """
        ...

    @abstractmethod
    async def remove(self, character: Character) -> None:
        """조회해 둔 레코드를 삭제합니다."""
        ...

    @abstractmethod
    async def count_all(self) -> int:
        """저장된 전체 레코드 수를 반환합니다."""
        ...
