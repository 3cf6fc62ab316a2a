"""강좌 Pydantic 요청/응답 스키마.

Course request/response schemas.
"""

from pydantic import Field

from app.schemas.common import ApiModel


class CourseCreate(ApiModel):
    """강좌 생성 요청 스키마.

    Course creation request. The id is assigned by the store.
    """

    title: str = Field(..., min_length=1, max_length=200)  # 강좌명 (Course title)
    credits: int = Field(..., ge=0, le=60)  # 학점 (Credit value)


class CourseResponse(ApiModel):
    """강좌 응답 스키마 — Course projection returned to callers."""

    id: int
    title: str
    credits: int


class CourseUpdate(CourseCreate):
    """강좌 수정 요청 스키마.

    Course update request. ``id`` must equal the route id.
    """

    id: int
