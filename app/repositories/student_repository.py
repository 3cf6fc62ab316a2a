"""학생 레포지토리 — Student persistence.

Student Repository — Binds the generic repository to the students table.
"""

from app.models.student import Student
from app.repositories.base import GenericRepository


class StudentRepository(GenericRepository[Student]):
    """students 테이블에 대한 레포지토리 (Repository for the students table)."""

    def __init__(self) -> None:
        super().__init__(Student)


# 싱글턴 인스턴스 — Singleton instance
student_repository: StudentRepository = StudentRepository()
