"""수강 등록 서비스 — 수강 등록 CRUD 비즈니스 로직.

Enrollment Service — Business logic for enrollment CRUD operations.
Course and student references are not pre-checked; a dangling reference is
rejected by the store's foreign keys and surfaces as ConstraintViolationError.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.enrollment import Enrollment
from app.repositories.enrollment_repository import enrollment_repository
from app.repositories.setters import FieldSetters
from app.schemas.enrollment import EnrollmentCreate, EnrollmentResponse, EnrollmentUpdate
from app.utils.audit import creation_audit
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import PagedResult, paginate


class EnrollmentService:
    """수강 등록 관련 비즈니스 로직을 처리하는 서비스.

    Service handling enrollment business logic.
    """

    async def list_enrollments(
        self,
        db: AsyncSession,
        page_number: int | None = None,
        page_size: int | None = None,
        course_id: int | None = None,
        student_id: int | None = None,
    ) -> PagedResult[EnrollmentResponse]:
        """수강 등록 목록을 페이지 조회합니다. 강좌/학생으로 필터 가능.

        List enrollments ordered by id, optionally narrowed to one course
        and/or one student.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_number: 페이지 번호 (Requested page number)
            page_size: 페이지 크기 (Requested page size)
            course_id: 강좌 필터 (Course filter, optional)
            student_id: 학생 필터 (Student filter, optional)

        Returns:
            PagedResult[EnrollmentResponse]: 수강 등록 페이지 (Page of enrollments)
        """
        query = enrollment_repository.query()
        if course_id is not None:
            query = query.filter(Enrollment.course_id == course_id)
        if student_id is not None:
            query = query.filter(Enrollment.student_id == student_id)
        query = query.order_by(Enrollment.id).project(EnrollmentResponse)
        return await paginate(db, query, page_number, page_size)

    async def get_enrollment(self, db: AsyncSession, enrollment_id: int) -> EnrollmentResponse:
        """수강 등록 단건 조회 — 없으면 NotFoundError."""
        enrollment: EnrollmentResponse | None = await (
            enrollment_repository.query()
            .filter(Enrollment.id == enrollment_id)
            .project(EnrollmentResponse)
            .first(db)
        )
        if enrollment is None:
            raise NotFoundError("enrollment not found")
        return enrollment

    async def create_enrollment(self, db: AsyncSession, data: EnrollmentCreate) -> EnrollmentResponse:
        """새 수강 등록을 생성합니다 (Create an enrollment)."""
        enrollment: Enrollment = Enrollment(
            course_id=data.course_id,
            student_id=data.student_id,
            **creation_audit(),
        )
        enrollment = await enrollment_repository.add(db, enrollment)
        return EnrollmentResponse(
            id=enrollment.id,
            course_id=enrollment.course_id,
            student_id=enrollment.student_id,
        )

    async def update_enrollment(self, db: AsyncSession, enrollment_id: int, data: EnrollmentUpdate) -> None:
        """수강 등록의 강좌/학생 참조를 수정합니다.

        Raises:
            BadRequestError: 경로 id와 본문 id 불일치 (Route id differs from body id)
            NotFoundError: 일치하는 수강 등록 없음 (No enrollment matched)
        """
        if enrollment_id != data.id:
            raise BadRequestError("Route ID and body ID do not match.")

        setters: FieldSetters = (
            FieldSetters()
            .set("course_id", data.course_id)
            .set("student_id", data.student_id)
        )
        affected: int = await enrollment_repository.update_where(
            db, [Enrollment.id == enrollment_id], setters, actor=settings.SYSTEM_ACTOR
        )
        if affected == 0:
            raise NotFoundError("enrollment not found")

    async def delete_enrollment(self, db: AsyncSession, enrollment_id: int) -> None:
        """수강 등록을 삭제합니다 — 없으면 NotFoundError."""
        if await enrollment_repository.delete_by_id(db, enrollment_id) == 0:
            raise NotFoundError("enrollment not found")


# 싱글턴 인스턴스 — Singleton instance
enrollment_service: EnrollmentService = EnrollmentService()
