"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which ``Base.metadata.create_all`` relies on.

Modules:
    audit: 식별자/감사 필드 믹스인 (Identity and audit mixin)
    course: 강좌 (Course)
    student: 학생 (Student)
    enrollment: 수강 등록 (Enrollment)
    user: 사용자 자격 증명 (User credentials)
"""

from app.models.course import Course
from app.models.student import Student
from app.models.enrollment import Enrollment
from app.models.user import User

__all__ = ["Course", "Student", "Enrollment", "User"]
