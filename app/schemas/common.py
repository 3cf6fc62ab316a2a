"""공통 Pydantic 스키마 정의.

Common Pydantic schema definitions shared by every API domain.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """API 스키마 베이스 — camelCase 직렬화.

    Base for request/response schemas. JSON keys are camelCase
    (``pageNumber``, ``idNumber``); Python code uses snake_case names,
    which are also accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(ApiModel):
    """서버 상태 응답 (Health check response)."""

    status: str


class ErrorDetail(ApiModel):
    """검증 오류 항목 — 실패한 필드와 사유 (One failed field and its reason)."""

    code: str
    message: str
