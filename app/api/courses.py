"""강좌 라우터 — 강좌 CRUD 엔드포인트.

Course Router — CRUD endpoints for courses.

Permission Matrix:
    - 목록/상세 조회: 인증 불필요 (Anonymous)
    - 생성/수정/삭제: Admin만 (Admin only)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from app.services.course_service import course_service
from app.utils.pagination import PagedResult

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[CourseResponse])
async def list_courses(
    db: Annotated[AsyncSession, Depends(get_db)],
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> PagedResult[CourseResponse]:
    """강좌 목록 페이지 조회 — id 오름차순.

    List courses one page at a time, ordered by id.
    """
    return await course_service.list_courses(db, page_number, page_size)


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(
    course_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CourseResponse:
    """강좌 상세 조회 (Get one course by id)."""
    return await course_service.get_course(db, course_id)


@router.post("", response_model=CourseResponse, status_code=201)
async def create_course(
    data: CourseCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> CourseResponse:
    """새 강좌를 생성합니다. Admin만 가능.

    Create a course. Admin only.
    """
    result: CourseResponse = await course_service.create_course(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/courses/{result.id}"
    return result


@router.put("/{course_id}", status_code=204)
async def update_course(
    course_id: int,
    data: CourseUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """강좌 제목/학점을 수정합니다. Admin만 가능.

    Update a course in place without loading it. Admin only.
    """
    await course_service.update_course(db, course_id, data)
    await db.commit()


@router.delete("/{course_id}", status_code=204)
async def delete_course(
    course_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """강좌를 삭제합니다. Admin만 가능 (Admin only)."""
    await course_service.delete_course(db, course_id)
    await db.commit()
