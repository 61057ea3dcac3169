"""Pagination Calculator.

(page, limit, total)로부터 페이지 이동 메타데이터를 계산하는 순수 함수입니다.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from apps.characters.application.common.dto import Page

T = TypeVar("T")


def count_pages(total: int, limit: int) -> int:
    """전체 페이지 수 (정수 올림 나눗셈).

    limit <= 0 은 호출자 계약 위반이며 여기서 처리하지 않습니다.
    """
    return -(-total // limit)


def paginate(items: Sequence[T], total: int, page: int, limit: int) -> Page[T]:
    """조회된 아이템을 페이지 메타데이터와 함께 감쌉니다.

    정책:
    - total_pages = ceil(total / limit), total == 0 이면 0
    - has_next = page < total_pages
    - has_prev = page > 1
    - page 범위를 보정(clamp)하지 않음

    Args:
        items: 현재 페이지 아이템
        total: 전체 개수
        page: 페이지 번호 (1부터 시작)
        limit: 페이지 크기

    Returns:
        Page
    """
    total_pages = count_pages(total, limit)
    return Page(
        data=items,
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
