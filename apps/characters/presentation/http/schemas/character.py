"""Character HTTP Schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from apps.characters.domain.enums import Episode


class CharacterCreateRequest(BaseModel):
    """캐릭터 생성 요청."""

    name: str = Field(..., min_length=1, description="캐릭터 이름", examples=["Luke Skywalker"])
    episodes: list[Episode] = Field(
        ...,
        description="등장 에피소드",
        examples=[["NEWHOPE", "EMPIRE", "JEDI"]],
    )
    planet: str | None = Field(None, description="출신 행성", examples=["Tatooine"])
    species: str | None = Field(None, description="종족", examples=["Human"])
    affiliation: str | None = Field(None, description="소속", examples=["Rebel Alliance"])

    model_config = ConfigDict(extra="forbid")


class CharacterUpdateRequest(BaseModel):
    """캐릭터 부분 수정 요청.

    전달된 필드만 변경됩니다.
    """

    name: str | None = Field(None, min_length=1, description="캐릭터 이름")
    episodes: list[Episode] | None = Field(None, description="등장 에피소드")
    planet: str | None = Field(None, description="출신 행성")
    species: str | None = Field(None, description="종족")
    affiliation: str | None = Field(None, description="소속")

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "episodes", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        # name, episodes는 비울 수 없음
        if value is None:
            raise ValueError("must not be null")
        return value


class CharacterResponse(BaseModel):
    """캐릭터 응답."""

    id: UUID = Field(..., description="캐릭터 ID")
    name: str = Field(..., description="캐릭터 이름")
    episodes: list[Episode] = Field(..., description="등장 에피소드")
    planet: str | None = Field(None, description="출신 행성")
    species: str | None = Field(None, description="종족")
    affiliation: str | None = Field(None, description="소속")
    created_at: datetime = Field(..., description="생성 시각")
    updated_at: datetime = Field(..., description="수정 시각")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PaginatedCharactersResponse(BaseModel):
    """페이지 단위 캐릭터 목록 응답."""

    data: list[CharacterResponse] = Field(..., description="캐릭터 목록")
    total: int = Field(..., description="전체 개수")
    page: int = Field(..., description="페이지 번호")
    limit: int = Field(..., description="페이지 크기")
    total_pages: int = Field(..., description="전체 페이지 수")
    has_next: bool = Field(..., description="다음 페이지 존재 여부")
    has_prev: bool = Field(..., description="이전 페이지 존재 여부")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
