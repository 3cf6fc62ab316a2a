"""학생 Pydantic 요청/응답 스키마.

Student request/response schemas.
"""

from datetime import date

from pydantic import Field

from app.schemas.common import ApiModel


class StudentCreate(ApiModel):
    """학생 생성 요청 스키마.

    Student creation request.

    Attributes:
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        date_of_birth: 생년월일 (Date of birth, ISO date)
        id_number: 외부 신분 번호 — 고유 (External id number, unique)
        picture: 사진 참조 (Picture reference, optional)
    """

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    id_number: str = Field(..., min_length=1, max_length=50)
    picture: str | None = Field(default=None, max_length=500)


class StudentResponse(ApiModel):
    """학생 응답 스키마 — Student projection returned to callers."""

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    id_number: str
    picture: str | None = None


class StudentUpdate(StudentCreate):
    """학생 수정 요청 스키마 — ``id`` must equal the route id."""

    id: int
