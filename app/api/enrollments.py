"""수강 등록 라우터 — 수강 등록 CRUD 엔드포인트.

Enrollment Router — CRUD endpoints for enrollments.
The list endpoint accepts optional ``courseId`` / ``studentId`` filters.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_admin
from app.database import get_db
from app.models.user import User
from app.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate
from app.services.enrollment_service import enrollment_service
from app.utils.pagination import PagedResult

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[EnrollmentResponse])
async def list_enrollments(
    db: Annotated[AsyncSession, Depends(get_db)],
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
    course_id: Annotated[int | None, Query(alias="courseId")] = None,
    student_id: Annotated[int | None, Query(alias="studentId")] = None,
) -> PagedResult[EnrollmentResponse]:
    """수강 등록 목록 페이지 조회 (Paged enrollment list, ordered by id)."""
    return await enrollment_service.list_enrollments(
        db, page_number, page_size, course_id=course_id, student_id=student_id
    )


@router.get("/{enrollment_id}", response_model=EnrollmentResponse)
async def get_enrollment(
    enrollment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EnrollmentResponse:
    """수강 등록 상세 조회 (Get one enrollment by id)."""
    return await enrollment_service.get_enrollment(db, enrollment_id)


@router.post("", response_model=EnrollmentResponse, status_code=201)
async def create_enrollment(
    data: EnrollmentCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> EnrollmentResponse:
    """새 수강 등록을 생성합니다. Admin만 가능 (Admin only)."""
    result: EnrollmentResponse = await enrollment_service.create_enrollment(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/enrollments/{result.id}"
    return result


@router.put("/{enrollment_id}", status_code=204)
async def update_enrollment(
    enrollment_id: int,
    data: EnrollmentUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """수강 등록을 수정합니다. Admin만 가능 (Admin only)."""
    await enrollment_service.update_enrollment(db, enrollment_id, data)
    await db.commit()


@router.delete("/{enrollment_id}", status_code=204)
async def delete_enrollment(
    enrollment_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """수강 등록을 삭제합니다. Admin만 가능 (Admin only)."""
    await enrollment_service.delete_enrollment(db, enrollment_id)
    await db.commit()
