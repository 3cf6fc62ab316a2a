"""사용자 모델 — 토큰 발급을 위한 자격 증명 저장.

User model — Credential store consumed by the token issuer.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.audit import EntityMixin

# 역할 이름 — Role names carried in the token "role" claim
ROLE_ADMIN: str = "Admin"
ROLE_USER: str = "User"


class User(EntityMixin, Base):
    """사용자 테이블.

    User table. Passwords are stored as bcrypt hashes only.

    Attributes:
        email: 로그인 이메일, 고유 (Login email, unique)
        first_name: 이름 (Given name)
        last_name: 성 (Family name)
        password_hash: bcrypt 해시 (Bcrypt password hash)
        role: 역할 이름 (Role name, "Admin" or "User")
        is_active: 활성 상태 (Active status flag)
        failed_login_count: 연속 로그인 실패 횟수 (Consecutive failed logins)
        lockout_end: 잠금 해제 시각 UTC, 잠금 아니면 None (Lockout expiry, or None)
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default=ROLE_USER)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    failed_login_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    lockout_end: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
