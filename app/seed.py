"""초기 데이터 시드 스크립트 — 관리자 계정과 샘플 강좌 생성.

Seed script — Creates the tables, an Admin account, and sample courses.
Tables come from ORM metadata; there are no migrations.

Usage:
    python -m app.seed

Creates:
    - 1개 관리자 계정: admin@example.com / admin123! (1 Admin user)
    - 3개 샘플 강좌 (3 sample courses)
"""

import asyncio

from app.database import async_session, engine, Base
from app.models import Course, User
from app.models.user import ROLE_ADMIN
from app.repositories.course_repository import course_repository
from app.repositories.user_repository import user_repository
from app.utils.audit import creation_audit
from app.utils.password import hash_password

ADMIN_EMAIL: str = "admin@example.com"
ADMIN_PASSWORD: str = "admin123!"

SAMPLE_COURSES: list[tuple[str, int]] = [
    ("Introduction to Programming", 3),
    ("Linear Algebra", 4),
    ("Databases", 3),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Idempotent: 관리자 계정이 이미 있으면 건너뜁니다 (Skips if the admin exists).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await user_repository.get_by_email(db, ADMIN_EMAIL) is not None:
            print("Already seeded. Skipping.")
            return

        admin: User = await user_repository.add(db, User(
            email=ADMIN_EMAIL,
            first_name="System",
            last_name="Admin",
            password_hash=hash_password(ADMIN_PASSWORD),
            role=ROLE_ADMIN,
            **creation_audit(),
        ))
        for title, credits in SAMPLE_COURSES:
            await course_repository.add(db, Course(title=title, credits=credits, **creation_audit()))

        await db.commit()
        print(f"Seeded: admin user id={admin.id} ({ADMIN_EMAIL} / {ADMIN_PASSWORD})")


if __name__ == "__main__":
    asyncio.run(seed())
