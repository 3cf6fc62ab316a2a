"""강좌 모델 — Course ORM model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.audit import EntityMixin


class Course(EntityMixin, Base):
    """강좌 테이블.

    Course table. Enrollments reference courses by ``course_id``.

    Attributes:
        title: 강좌명 (Course title)
        credits: 학점 (Credit value)
    """

    __tablename__ = "courses"

    # 강좌명 — Course display title (max 200 chars, required)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    # 학점 — Credit value
    credits: Mapped[int] = mapped_column(Integer, nullable=False)
