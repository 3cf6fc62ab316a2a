"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module using bcrypt.
Passwords are never stored in plain text.
"""

import bcrypt

# 존재하지 않는 사용자 검증 시 사용하는 더미 해시 — 응답 시간으로 계정 존재 여부가 드러나지 않도록
# Dummy hash checked for unknown accounts so timing does not reveal whether an email exists
_DUMMY_HASH: bytes = bcrypt.hashpw(b"dummy-password", bcrypt.gensalt())


def hash_password(password: str) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password with a random bcrypt salt.

    Args:
        password: 평문 비밀번호 (Plain text password to hash)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash. When no hash is
    given (unknown account), a dummy hash is checked instead and the result
    is always False, keeping both failure paths equally slow.

    Args:
        plain_password: 검증할 평문 비밀번호 (Plain text password to verify)
        hashed_password: 저장된 bcrypt 해시, 없으면 None (Stored hash, or None)

    Returns:
        bool: 일치하면 True (True if password matches hash)
    """
    candidate: bytes = plain_password.encode("utf-8")
    if hashed_password is None:
        bcrypt.checkpw(candidate, _DUMMY_HASH)
        return False
    return bcrypt.checkpw(candidate, hashed_password.encode("utf-8"))
