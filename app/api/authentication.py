"""인증 라우터 — 로그인(토큰 발급) 및 회원가입.

Authentication Router — Login (token issuance) and registration endpoints.
Request validation failures on these routes are 400 with a flat
``[{code, message}]`` list instead of FastAPI's 422 body.
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, RegisterResponse
from app.schemas.common import ErrorDetail
from app.services.auth_service import auth_service
from app.utils.exceptions import UnauthorizedError


def validation_error_list(exc: RequestValidationError) -> list[ErrorDetail]:
    """검증 오류를 [{code, message}] 목록으로 변환합니다.

    ``code`` is the failing field name (the last location segment), or the
    pydantic error type when there is no location.
    """
    details: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        code: str = str(loc[-1]) if loc else str(error.get("type", "invalid"))
        details.append(ErrorDetail(code=code, message=str(error.get("msg", ""))))
    return details


class ErrorListRoute(APIRoute):
    """요청 검증 실패를 400 오류 목록으로 응답하는 라우트 클래스."""

    def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
        original = super().get_route_handler()

        async def handler(request: Request) -> Response:
            try:
                return await original(request)
            except RequestValidationError as exc:
                errors = [d.model_dump(mode="json") for d in validation_error_list(exc)]
                return JSONResponse(status_code=400, content=errors)

        return handler


router: APIRouter = APIRouter(route_class=ErrorListRoute)

_VALIDATION_RESPONSE = {400: {"model": list[ErrorDetail], "description": "Validation errors"}}


@router.post("/login", response_model=AuthResponse, responses=_VALIDATION_RESPONSE)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuthResponse:
    """로그인 — 자격 증명 검증 후 JWT 발급.

    Verify credentials and issue a bearer token. Any failure is 401.
    """
    try:
        result: AuthResponse = await auth_service.authenticate(db, data)
    except UnauthorizedError:
        # 실패 횟수/잠금 상태는 401이어도 저장 — Persist the failure counter
        await db.commit()
        raise
    await db.commit()
    return result


@router.post(
    "/register", response_model=RegisterResponse, status_code=201, responses=_VALIDATION_RESPONSE
)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RegisterResponse:
    """회원가입 — "User" 역할 계정 생성.

    Register an account with the "User" role.
    """
    user: User = await auth_service.register(db, data)
    await db.commit()
    return RegisterResponse(user_id=user.id, email=user.email)
