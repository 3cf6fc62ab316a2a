"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "sub": "42",                 # 사용자 ID (User identifier)
        "jti": "uuid4",              # 토큰 고유 ID (Token identifier)
        "email": "a@b.com",          # 이메일 (Email claim)
        "userId": "42",              # 사용자 ID 사본 (Client-facing user id)
        "role": "Admin",             # 역할 이름 (Role name)
        "iss": "...", "aud": "...",  # 발급자/대상자 (Issuer / audience)
        "exp": 1234567890            # 만료 시간 UNIX timestamp (Expiration)
    }
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from app.config import settings


def create_access_token(data: dict[str, Any]) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a signed JWT with issuer, audience, a unique ``jti`` and an
    expiry of JWT_DURATION_IN_HOURS from now.

    Args:
        data: JWT 페이로드 데이터 (Claims, typically sub/email/userId/role)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + timedelta(hours=settings.JWT_DURATION_IN_HOURS)
    to_encode.update({
        "exp": expire,
        "jti": str(uuid.uuid4()),
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
    })
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify signature, expiry, issuer and audience.

    Args:
        token: JWT 토큰 문자열 (Encoded JWT token string)

    Returns:
        dict[str, Any]: 디코딩된 페이로드 (Decoded payload dictionary)

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (Any other validation failure)
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
    )
