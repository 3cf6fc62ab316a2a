"""강좌 레포지토리 — Course persistence.

Course Repository — Binds the generic repository to the courses table.
"""

from app.models.course import Course
from app.repositories.base import GenericRepository


class CourseRepository(GenericRepository[Course]):
    """courses 테이블에 대한 레포지토리 (Repository for the courses table)."""

    def __init__(self) -> None:
        super().__init__(Course)


# 싱글턴 인스턴스 — Singleton instance
course_repository: CourseRepository = CourseRepository()
