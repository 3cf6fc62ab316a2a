"""공통 엔티티 컬럼 정의 — 식별자 및 감사(audit) 필드.

Shared entity columns — surrogate identity and audit metadata.
Every persisted entity (Course, Student, Enrollment, User) mixes this in so
the generic repository can rely on an integer ``id`` column.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column


# 감사 컬럼 이름 — Audit columns the repository manages
AUDIT_FIELDS: frozenset[str] = frozenset({"created_at", "updated_at", "created_by", "updated_by"})


def utc_now() -> datetime:
    """현재 UTC 시각 — Current timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class EntityMixin:
    """식별자 + 감사 필드 믹스인.

    Identity and audit columns shared by all entities.

    Attributes:
        id: 자동 증가 기본키, 저장소가 할당 (Auto-increment PK assigned by the store)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
        created_by: 생성 행위자 (Actor who created the row)
        updated_by: 수정 행위자 (Actor who last updated the row)
    """

    # SQLite에서도 삭제된 id를 재사용하지 않도록 AUTOINCREMENT 사용
    # Never reuse deleted ids, even on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    # onupdate 없음 — update_where가 명시한 필드만 변경 (No onupdate: only named setters change)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)
    updated_by: Mapped[str] = mapped_column(String(100), nullable=False)
