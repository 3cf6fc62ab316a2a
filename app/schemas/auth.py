"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication request/response schema definitions.
Covers login, registration and token issuance.
"""

from pydantic import Field

from app.schemas.common import ApiModel


class LoginRequest(ApiModel):
    """로그인 요청 스키마.

    Login request schema.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=1)


class RegisterRequest(ApiModel):
    """회원가입 요청 스키마.

    Registration request schema. Creates a user with the "User" role.

    Attributes:
        email: 로그인 이메일, 고유 (Login email, unique)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
    """

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(..., min_length=8, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class AuthResponse(ApiModel):
    """토큰 발급 응답 스키마.

    Token issuance response returned after a successful login.

    Attributes:
        user_id: 인증된 사용자 id (Authenticated subject id)
        token: 서명된 JWT 액세스 토큰 (Signed, time-bounded JWT)
        token_type: 토큰 유형 (Always "bearer")
    """

    user_id: int
    token: str
    token_type: str = "bearer"


class RegisterResponse(ApiModel):
    """회원가입 응답 스키마 (Registration response)."""

    user_id: int
    email: str
