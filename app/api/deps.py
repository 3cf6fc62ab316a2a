"""FastAPI 의존성 주입 모듈 — 인증 및 역할 검사.

FastAPI dependency module — Authentication and role-based authorization.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. decode_token()이 서명/만료/발급자/대상자를 검증
       (decode_token verifies signature, expiry, issuer and audience)
    3. 페이로드의 "sub"로 DB에서 활성 사용자를 조회
       (Active user is fetched from DB using the "sub" claim)

Authorization Flow (require_role):
    사용자 역할이 허용 목록에 없으면 403 Forbidden
    (403 when the user's role is not among the allowed roles)
"""

from typing import Annotated, Awaitable, Callable

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import ROLE_ADMIN, User
from app.repositories.user_repository import user_repository
from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 헤더 누락 시 직접 401 처리 (auto_error=False)
# Extracts the bearer token; a missing header is turned into 401 below
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """JWT 토큰에서 현재 인증된 사용자를 추출합니다.

    Decode the bearer token and return the authenticated, active user.

    Raises:
        UnauthorizedError: 토큰 누락/무효/만료, 또는 사용자 없음/비활성
                           (Missing, invalid or expired token; unknown or inactive user)
    """
    if credentials is None:
        raise UnauthorizedError()
    try:
        payload: dict = decode_token(credentials.credentials)
        user_id: int = int(payload["sub"])
    except (jwt.InvalidTokenError, KeyError, ValueError):
        raise UnauthorizedError("Invalid or expired token")

    user: User | None = await user_repository.query().filter(User.id == user_id).one_or_none(db)
    if user is None or not user.is_active:
        raise UnauthorizedError("User not found or inactive")
    return user


def require_role(*roles: str) -> Callable[..., Awaitable[User]]:
    """역할 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing that the current user holds one of
    ``roles``.

    Args:
        roles: 허용 역할 이름 (Allowed role names)

    Returns:
        FastAPI 의존성 함수 — 인증된 사용자 반환 또는 403 발생
        (Dependency returning the user or raising 403)
    """
    async def _check(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if current_user.role not in roles:
            raise ForbiddenError()
        return current_user
    return _check


# 편의 의존성 — 쓰기 엔드포인트는 Admin만 허용 (Write endpoints are Admin-only)
require_admin = require_role(ROLE_ADMIN)
