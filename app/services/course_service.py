"""강좌 서비스 — 강좌 CRUD 비즈니스 로직.

Course Service — Business logic for course CRUD operations.
Reads go through projected queries; updates are set-based and never load
the row first.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.course import Course
from app.repositories.course_repository import course_repository
from app.repositories.setters import FieldSetters
from app.schemas.course import CourseCreate, CourseResponse, CourseUpdate
from app.utils.audit import creation_audit
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import PagedResult, paginate


class CourseService:
    """강좌 관련 비즈니스 로직을 처리하는 서비스.

    Service handling course business logic.
    """

    def _to_response(self, course: Course) -> CourseResponse:
        """강좌 모델을 응답 스키마로 변환합니다 (Course model -> CourseResponse)."""
        return CourseResponse(id=course.id, title=course.title, credits=course.credits)

    async def list_courses(
        self,
        db: AsyncSession,
        page_number: int | None = None,
        page_size: int | None = None,
    ) -> PagedResult[CourseResponse]:
        """강좌 목록을 id 오름차순으로 페이지 조회합니다.

        List courses ordered by ascending id, one page at a time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            page_number: 페이지 번호 (Requested page number)
            page_size: 페이지 크기 (Requested page size)

        Returns:
            PagedResult[CourseResponse]: 강좌 페이지 (Page of courses)
        """
        query = course_repository.query().order_by(Course.id).project(CourseResponse)
        return await paginate(db, query, page_number, page_size)

    async def get_course(self, db: AsyncSession, course_id: int) -> CourseResponse:
        """강좌 단건 조회.

        Raises:
            NotFoundError: 강좌가 없을 때 (Course not found)
        """
        course: CourseResponse | None = await (
            course_repository.query()
            .filter(Course.id == course_id)
            .project(CourseResponse)
            .first(db)
        )
        if course is None:
            raise NotFoundError("course not found!")
        return course

    async def create_course(self, db: AsyncSession, data: CourseCreate) -> CourseResponse:
        """새 강좌를 생성합니다.

        Create a new course with system audit fields.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 강좌 생성 데이터 (Course creation data)

        Returns:
            CourseResponse: 생성된 강좌 (Created course with its id)
        """
        course: Course = Course(title=data.title, credits=data.credits, **creation_audit())
        course = await course_repository.add(db, course)
        return self._to_response(course)

    async def update_course(self, db: AsyncSession, course_id: int, data: CourseUpdate) -> None:
        """강좌 제목/학점을 단일 UPDATE 문으로 수정합니다.

        Update title and credits in one set-based statement.

        Raises:
            BadRequestError: 경로 id와 본문 id 불일치 (Route id differs from body id)
            NotFoundError: 일치하는 강좌 없음 (No course matched)
        """
        if course_id != data.id:
            raise BadRequestError("Route ID and course ID do not match.")

        setters: FieldSetters = FieldSetters().set("title", data.title).set("credits", data.credits)
        affected: int = await course_repository.update_where(
            db, [Course.id == course_id], setters, actor=settings.SYSTEM_ACTOR
        )
        if affected == 0:
            raise NotFoundError(f"course with Id: {course_id} is missing")

    async def delete_course(self, db: AsyncSession, course_id: int) -> None:
        """강좌를 삭제합니다.

        Raises:
            NotFoundError: 삭제할 강좌가 없을 때 (Course not found)
        """
        if await course_repository.delete_by_id(db, course_id) == 0:
            raise NotFoundError(f"course with Id: {course_id} is missing")


# 싱글턴 인스턴스 — Singleton instance
course_service: CourseService = CourseService()
