"""수강 등록 Pydantic 요청/응답 스키마.

Enrollment request/response schemas.
"""

from pydantic import Field

from app.schemas.common import ApiModel


class EnrollmentCreate(ApiModel):
    """수강 등록 생성 요청 스키마 (Enrollment creation request)."""

    course_id: int = Field(..., ge=1)  # 강좌 id (Referenced course)
    student_id: int = Field(..., ge=1)  # 학생 id (Referenced student)


class EnrollmentResponse(ApiModel):
    """수강 등록 응답 스키마 (Enrollment projection)."""

    id: int
    course_id: int
    student_id: int


class EnrollmentUpdate(EnrollmentCreate):
    """수강 등록 수정 요청 스키마 — ``id`` must equal the route id."""

    id: int
