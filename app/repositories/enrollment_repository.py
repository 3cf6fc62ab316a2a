"""수강 등록 레포지토리 — Enrollment persistence.

Enrollment Repository — Binds the generic repository to the enrollments table.
"""

from app.models.enrollment import Enrollment
from app.repositories.base import GenericRepository


class EnrollmentRepository(GenericRepository[Enrollment]):
    """enrollments 테이블에 대한 레포지토리 (Repository for the enrollments table)."""

    def __init__(self) -> None:
        super().__init__(Enrollment)


# 싱글턴 인스턴스 — Singleton instance
enrollment_repository: EnrollmentRepository = EnrollmentRepository()
