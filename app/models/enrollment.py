"""수강 등록 모델 — Enrollment ORM model."""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.audit import EntityMixin


class Enrollment(EntityMixin, Base):
    """수강 등록 테이블 — 학생과 강좌의 연결.

    Enrollment table linking one student to one course.
    No cascade is declared; deleting a referenced course or student is
    governed by the store's default referential action.

    Attributes:
        course_id: 강좌 FK (Course foreign key)
        student_id: 학생 FK (Student foreign key)
    """

    __tablename__ = "enrollments"

    course_id: Mapped[int] = mapped_column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    student_id: Mapped[int] = mapped_column(Integer, ForeignKey("students.id"), nullable=False, index=True)
