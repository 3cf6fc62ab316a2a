"""학생 서비스 — 학생 CRUD 비즈니스 로직.

Student Service — Business logic for student CRUD operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.student import Student
from app.repositories.setters import FieldSetters
from app.repositories.student_repository import student_repository
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.utils.audit import creation_audit
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import PagedResult, paginate

# 수정 가능한 학생 필드 — Student fields written by an update request
_UPDATABLE_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "date_of_birth",
    "id_number",
    "picture",
)


class StudentService:
    """학생 관련 비즈니스 로직을 처리하는 서비스.

    Service handling student business logic.
    """

    async def list_students(
        self,
        db: AsyncSession,
        page_number: int | None = None,
        page_size: int | None = None,
    ) -> PagedResult[StudentResponse]:
        """학생 목록을 id 오름차순으로 페이지 조회합니다 (Paged, ordered by id)."""
        query = student_repository.query().order_by(Student.id).project(StudentResponse)
        return await paginate(db, query, page_number, page_size)

    async def get_student(self, db: AsyncSession, student_id: int) -> StudentResponse:
        """학생 단건 조회 — 없으면 NotFoundError."""
        student: StudentResponse | None = await (
            student_repository.query()
            .filter(Student.id == student_id)
            .project(StudentResponse)
            .first(db)
        )
        if student is None:
            raise NotFoundError("student not found")
        return student

    async def create_student(self, db: AsyncSession, data: StudentCreate) -> StudentResponse:
        """새 학생을 생성합니다.

        Create a new student. A duplicate ``id_number`` surfaces as
        ConstraintViolationError from the repository.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 학생 생성 데이터 (Student creation data)

        Returns:
            StudentResponse: 생성된 학생 (Created student with its id)
        """
        student: Student = Student(**data.model_dump(), **creation_audit())
        student = await student_repository.add(db, student)
        return StudentResponse.model_validate(student, from_attributes=True)

    async def update_student(self, db: AsyncSession, student_id: int, data: StudentUpdate) -> None:
        """학생 정보를 단일 UPDATE 문으로 수정합니다.

        Raises:
            BadRequestError: 경로 id와 본문 id 불일치 (Route id differs from body id)
            NotFoundError: 일치하는 학생 없음 (No student matched)
        """
        if student_id != data.id:
            raise BadRequestError("Route ID and student ID do not match.")

        setters: FieldSetters = FieldSetters(data.model_dump(include=set(_UPDATABLE_FIELDS)))
        affected: int = await student_repository.update_where(
            db, [Student.id == student_id], setters, actor=settings.SYSTEM_ACTOR
        )
        if affected == 0:
            raise NotFoundError("student not found")

    async def delete_student(self, db: AsyncSession, student_id: int) -> None:
        """학생을 삭제합니다 — 없으면 NotFoundError."""
        if await student_repository.delete_by_id(db, student_id) == 0:
            raise NotFoundError("student not found")


# 싱글턴 인스턴스 — Singleton instance
student_service: StudentService = StudentService()
