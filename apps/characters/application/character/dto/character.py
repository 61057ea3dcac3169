"""Character DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Sequence

from apps.characters.domain.enums import Episode


class _Unset:
    """필드가 전달되지 않았음을 나타내는 표식."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True, slots=True)
class CharacterCreate:
    """캐릭터 생성 입력.

    Attributes:
        name: 캐릭터 이름
        episodes: 등장 에피소드
        planet: 출신 행성
        species: 종족
        affiliation: 소속
    """

    name: str
    episodes: Sequence[Episode] = field(default_factory=tuple)
    planet: str | None = None
    species: str | None = None
    affiliation: str | None = None


@dataclass(frozen=True, slots=True)
class CharacterUpdate:
    """캐릭터 부분 수정 입력.

    전달되지 않은 필드는 UNSET으로 남아 기존 값이 유지됩니다.
    명시적인 None은 값을 비우는 변경으로 취급합니다.
    """

    name: str = UNSET
    episodes: Sequence[Episode] = UNSET
    planet: str | None = UNSET
    species: str | None = UNSET
    affiliation: str | None = UNSET

    def changes(self) -> dict[str, Any]:
        """전달된 필드만 반환합니다."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
