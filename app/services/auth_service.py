"""인증 서비스 — 로그인(토큰 발급) 및 회원가입 비즈니스 로직.

Auth Service — Business logic for credential verification, token issuance
and account registration. Every credential failure produces the same
UnauthorizedError so callers cannot tell which factor was wrong.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.audit import utc_now
from app.models.user import ROLE_USER, User
from app.repositories.setters import FieldSetters
from app.repositories.user_repository import user_repository
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.utils.audit import creation_audit
from app.utils.exceptions import ConstraintViolationError, DuplicateError, UnauthorizedError
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password

# 인증 실패 메시지 — 이메일/비밀번호 중 무엇이 틀렸는지 노출하지 않음
# Single failure message; never reveals which credential was wrong
INVALID_CREDENTIALS: str = "Invalid email or password"


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, user: User) -> dict[str, str]:
        """JWT 토큰 페이로드를 생성합니다.

        Build the JWT claims for a verified user.

        Args:
            user: 사용자 모델 (User model instance)

        Returns:
            dict[str, str]: JWT 페이로드 딕셔너리 (JWT payload dictionary)
        """
        return {
            "sub": str(user.id),
            "email": user.email,
            "userId": str(user.id),
            "role": user.role,
        }

    def _is_locked_out(self, user: User, now: datetime) -> bool:
        """잠금 해제 시각이 아직 지나지 않았는지 확인합니다."""
        if user.lockout_end is None:
            return False
        # SQLite는 tzinfo를 보존하지 않음 — stored naive values are UTC
        lockout_end: datetime = user.lockout_end
        if lockout_end.tzinfo is None:
            lockout_end = lockout_end.replace(tzinfo=timezone.utc)
        return lockout_end > now

    async def _record_failure(self, db: AsyncSession, user: User, now: datetime) -> None:
        """로그인 실패를 기록하고, 한도에 도달하면 계정을 잠급니다.

        Count a failed login. Reaching LOGIN_MAX_FAILED_ATTEMPTS locks the
        account for LOGIN_LOCKOUT_MINUTES and restarts the count.
        """
        failures: int = user.failed_login_count + 1
        setters: FieldSetters = FieldSetters().set("failed_login_count", failures)
        if failures >= settings.LOGIN_MAX_FAILED_ATTEMPTS:
            setters.set("failed_login_count", 0)
            setters.set("lockout_end", now + timedelta(minutes=settings.LOGIN_LOCKOUT_MINUTES))
        await user_repository.update_where(db, [User.id == user.id], setters, actor=settings.SYSTEM_ACTOR)

    async def authenticate(self, db: AsyncSession, data: LoginRequest) -> AuthResponse:
        """자격 증명을 검증하고 토큰을 발급합니다.

        Verify credentials and issue a signed, time-bounded token.
        Wrong passwords are counted; a locked-out account is rejected even
        with the right password until the lockout expires. The caller
        commits on both outcomes so the counter persists.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)

        Returns:
            AuthResponse: 사용자 id와 토큰 (Subject id and token)

        Raises:
            UnauthorizedError: 알 수 없는 이메일, 잘못된 비밀번호, 비활성 또는 잠긴 계정
                               (Unknown email, wrong password, inactive or locked-out account)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        password_hash: str | None = user.password_hash if user is not None else None
        password_ok: bool = verify_password(data.password, password_hash)
        if user is None or not user.is_active:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        now: datetime = utc_now()
        if self._is_locked_out(user, now):
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if not password_ok:
            await self._record_failure(db, user, now)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if user.failed_login_count or user.lockout_end is not None:
            await user_repository.update_where(
                db,
                [User.id == user.id],
                FieldSetters().set("failed_login_count", 0).set("lockout_end", None),
                actor=settings.SYSTEM_ACTOR,
            )

        token: str = create_access_token(self._build_jwt_payload(user))
        return AuthResponse(user_id=user.id, token=token)

    async def register(self, db: AsyncSession, data: RegisterRequest) -> User:
        """회원가입을 처리합니다 — "User" 역할로 생성.

        Register a new account with the "User" role.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)

        Returns:
            User: 생성된 사용자 (Created user)

        Raises:
            DuplicateError: 이미 사용 중인 이메일 (Email already registered)
        """
        email: str = data.email.strip().lower()
        if await user_repository.get_by_email(db, email) is not None:
            raise DuplicateError("Email is already registered")

        user: User = User(
            email=email,
            first_name=data.first_name,
            last_name=data.last_name,
            password_hash=hash_password(data.password),
            role=ROLE_USER,
            **creation_audit(),
        )
        try:
            return await user_repository.add(db, user)
        except ConstraintViolationError as exc:
            # 동시 가입 경합 — Concurrent registration with the same email
            raise DuplicateError("Email is already registered") from exc


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService()
