"""페이지네이션 유틸리티 모듈.

Pagination utility module for composed queries.
Provides the ``PagedResult`` response model and the ``paginate`` function
used by every list endpoint.

Caller obligation:
    쿼리는 반드시 결정적 정렬(order_by)을 가져야 합니다. 정렬이 없으면
    페이지 사이에 행이 중복되거나 누락될 수 있습니다 (검사하지 않음).
    The query must carry a deterministic order. Without one, rows may repeat
    or be skipped across pages; this is not checked at runtime.
"""

import math
from typing import Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.repositories.query import QueryComposer
from app.schemas.common import ApiModel

T = TypeVar("T")

DEFAULT_PAGE_NUMBER: int = 1


class PagedResult(ApiModel, Generic[T]):
    """페이지네이션 결과 모델.

    One page of an ordered result set plus its position metadata.
    Serialized with camelCase keys (``pageNumber``, ``totalCount`` ...).

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        page_number: 현재 페이지 번호, 1부터 시작 (Current page, 1-based)
        page_size: 페이지당 항목 수 (Items per page)
        total_count: 전체 항목 수 (Total count across all pages)
        total_pages: 전체 페이지 수 (ceil(total_count / page_size), 0 when empty)
    """

    items: list[T]
    page_number: int
    page_size: int
    total_count: int
    total_pages: int


def normalize_paging(page_number: int | None, page_size: int | None) -> tuple[int, int]:
    """요청 페이지 번호/크기를 허용 범위로 보정합니다.

    Apply defaults and clamp: page number below 1 becomes 1; page size
    defaults to ``PAGING_DEFAULT_PAGE_SIZE`` and is clamped to
    ``[1, PAGING_MAX_PAGE_SIZE]``.

    Returns:
        tuple[int, int]: (페이지 번호, 페이지 크기) (Normalized page number and size)
    """
    number: int = DEFAULT_PAGE_NUMBER if page_number is None else max(page_number, 1)
    size: int = settings.PAGING_DEFAULT_PAGE_SIZE if page_size is None else page_size
    size = min(max(size, 1), settings.PAGING_MAX_PAGE_SIZE)
    return number, size


def count_pages(total_count: int, page_size: int) -> int:
    """전체 페이지 수 — ceil(total/size)."""
    return math.ceil(total_count / page_size) if total_count > 0 else 0


async def paginate(
    db: AsyncSession,
    query: QueryComposer[T],
    page_number: int | None = None,
    page_size: int | None = None,
) -> PagedResult[T]:
    """정렬된 쿼리의 한 페이지를 조회합니다.

    Run a paginated query. Two round trips are taken: one for the total
    count with the same filters (ordering ignored), one for the
    OFFSET/LIMIT window. A page past the end yields empty ``items`` with
    otherwise correct metadata.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: 정렬된 쿼리 컴포저 (Ordered query composer, possibly projected)
        page_number: 요청 페이지 번호 (Requested page, default 1)
        page_size: 페이지당 항목 수 (Requested page size, default from settings)

    Returns:
        PagedResult[T]: 페이지 항목과 메타데이터 (Page items and metadata)
    """
    number, size = normalize_paging(page_number, page_size)

    # 전체 개수 조회 — 정렬과 무관하게 동일 조건으로 COUNT (Count with the same filters)
    total: int = await query.count(db)

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    offset: int = (number - 1) * size
    items: list[T] = await query.slice(db, offset, size) if offset < total else []

    return PagedResult(
        items=items,
        page_number=number,
        page_size=size,
        total_count=total,
        total_pages=count_pages(total, size),
    )
