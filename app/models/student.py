"""학생 모델 — Student ORM model."""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.audit import EntityMixin


class Student(EntityMixin, Base):
    """학생 테이블.

    Student table.

    Attributes:
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        date_of_birth: 생년월일 (Date of birth)
        id_number: 외부 신분 번호, 고유 (External identity number, unique)
        picture: 사진 경로 또는 URL (Picture reference, optional)
    """

    __tablename__ = "students"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    # 외부 신분 번호 — 중복 시 ConstraintViolationError (Duplicate raises ConstraintViolationError)
    id_number: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    picture: Mapped[str | None] = mapped_column(String(500), nullable=True)
