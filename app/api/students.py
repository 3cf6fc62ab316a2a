"""학생 라우터 — 학생 CRUD 엔드포인트.

Student Router — CRUD endpoints for students.
Reads are anonymous; writes require the Admin role.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.student_service import student_service
from app.utils.pagination import PagedResult

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[StudentResponse])
async def list_students(
    db: Annotated[AsyncSession, Depends(get_db)],
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> PagedResult[StudentResponse]:
    """학생 목록 페이지 조회 (Paged student list, ordered by id)."""
    return await student_service.list_students(db, page_number, page_size)


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> StudentResponse:
    """학생 상세 조회 (Get one student by id)."""
    return await student_service.get_student(db, student_id)


@router.post("", response_model=StudentResponse, status_code=201)
async def create_student(
    data: StudentCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> StudentResponse:
    """새 학생을 생성합니다. Admin만 가능 (Admin only)."""
    result: StudentResponse = await student_service.create_student(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/students/{result.id}"
    return result


@router.put("/{student_id}", status_code=204)
async def update_student(
    student_id: int,
    data: StudentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """학생 정보를 수정합니다. Admin만 가능 (Admin only)."""
    await student_service.update_student(db, student_id, data)
    await db.commit()


@router.delete("/{student_id}", status_code=204)
async def delete_student(
    student_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """학생을 삭제합니다. Admin만 가능 (Admin only)."""
    await student_service.delete_student(db, student_id)
    await db.commit()
