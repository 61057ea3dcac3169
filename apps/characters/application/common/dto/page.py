"""Pagination DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """페이지 조회 결과.

    Attributes:
        data: 현재 페이지 아이템
        total: 페이징과 무관한 전체 개수
        page: 페이지 번호 (1부터 시작)
        limit: 페이지 크기
        total_pages: 전체 페이지 수
        has_next: 다음 페이지 존재 여부
        has_prev: 이전 페이지 존재 여부
    """

    data: Sequence[T]
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool
