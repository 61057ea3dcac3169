"""Characters HTTP Controller."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from apps.characters.application.character.dto import CharacterCreate, CharacterUpdate
from apps.characters.application.character.services import CharacterService
from apps.characters.presentation.http.schemas import (
    CharacterCreateRequest,
    CharacterResponse,
    CharacterUpdateRequest,
    PaginatedCharactersResponse,
)
from apps.characters.setup.dependencies import get_character_service

router = APIRouter(prefix="/characters", tags=["characters"])

ServiceDep = Annotated[CharacterService, Depends(get_character_service)]


@router.post(
    "",
    response_model=CharacterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="캐릭터 생성",
    responses={409: {"description": "Character with this name already exists"}},
)
async def create_character(request: CharacterCreateRequest, service: ServiceDep) -> CharacterResponse:
    """새 캐릭터를 생성합니다."""
    character = await service.create(
        CharacterCreate(
            name=request.name,
            episodes=request.episodes,
            planet=request.planet,
            species=request.species,
            affiliation=request.affiliation,
        )
    )
    return CharacterResponse.model_validate(character)


@router.get(
    "",
    response_model=PaginatedCharactersResponse,
    summary="캐릭터 목록 조회",
    description="created_at 내림차순으로 페이지 단위 목록을 반환합니다.",
)
async def list_characters(
    service: ServiceDep,
    page: Annotated[int, Query(ge=1, description="페이지 번호")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="페이지 크기")] = 10,
) -> PaginatedCharactersResponse:
    """캐릭터 목록을 조회합니다."""
    result = await service.find_all(page, limit)
    return PaginatedCharactersResponse.model_validate(result)


@router.post(
    "/seed",
    response_model=list[CharacterResponse],
    status_code=status.HTTP_201_CREATED,
    summary="초기 캐릭터 시드",
    description="저장소가 비어 있을 때만 기본 캐릭터를 저장합니다. 이미 데이터가 있으면 빈 목록을 반환합니다.",
)
async def seed_characters(service: ServiceDep) -> list[CharacterResponse]:
    """기본 캐릭터를 시드합니다."""
    characters = await service.seed()
    return [CharacterResponse.model_validate(c) for c in characters]


@router.get(
    "/name/{name}",
    response_model=CharacterResponse,
    summary="이름으로 캐릭터 조회",
    responses={404: {"description": "Character not found"}},
)
async def get_character_by_name(name: str, service: ServiceDep) -> CharacterResponse:
    """이름으로 캐릭터를 조회합니다."""
    character = await service.find_by_name(name)
    return CharacterResponse.model_validate(character)


@router.get(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="ID로 캐릭터 조회",
    responses={404: {"description": "Character not found"}},
)
async def get_character(character_id: UUID, service: ServiceDep) -> CharacterResponse:
    """ID로 캐릭터를 조회합니다."""
    character = await service.find_one(character_id)
    return CharacterResponse.model_validate(character)


@router.patch(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="캐릭터 수정",
    responses={
        404: {"description": "Character not found"},
        409: {"description": "Character with this name already exists"},
    },
)
async def update_character(
    character_id: UUID,
    request: CharacterUpdateRequest,
    service: ServiceDep,
) -> CharacterResponse:
    """전달된 필드만 수정합니다."""
    update = CharacterUpdate(**request.model_dump(exclude_unset=True))
    character = await service.update(character_id, update)
    return CharacterResponse.model_validate(character)


@router.delete(
    "/{character_id}",
    summary="캐릭터 삭제",
    responses={404: {"description": "Character not found"}},
)
async def delete_character(character_id: UUID, service: ServiceDep) -> Response:
    """캐릭터를 삭제합니다."""
    await service.remove(character_id)
    return Response(status_code=status.HTTP_200_OK)
