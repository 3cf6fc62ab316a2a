"""감사 필드 스탬프 헬퍼.

Audit field helpers. New rows get their audit block from ``creation_audit``;
updates get ``updated_at``/``updated_by`` from ``update_audit``, which the
generic repository applies itself. Callers never set audit columns in
update setters.
"""

from datetime import datetime
from typing import Any

from app.config import settings
from app.models.audit import utc_now


def creation_audit() -> dict[str, Any]:
    """생성 시 감사 필드 — created/updated 모두 같은 시각.

    Audit values for a new row; both timestamps are identical so
    ``created_at <= updated_at`` holds from the start.
    """
    now: datetime = utc_now()
    return {
        "created_at": now,
        "updated_at": now,
        "created_by": settings.SYSTEM_ACTOR,
        "updated_by": settings.SYSTEM_ACTOR,
    }


def update_audit(actor: str) -> dict[str, Any]:
    """수정 시 감사 필드 — 현재 시각과 행위자."""
    return {"updated_at": utc_now(), "updated_by": actor}
