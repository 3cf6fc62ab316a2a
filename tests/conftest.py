"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite database, session, and httpx client fixtures.
Each test gets its own file-backed aiosqlite database (foreign keys enabled)
with the schema created from ORM metadata, so no cleanup is needed.
"""

import os

# 앱 임포트 전에 드라이버 설정 — Configure before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["AXIOM_API_TOKEN"] = ""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.course import Course
from app.models.student import Student
from app.models.user import ROLE_ADMIN, ROLE_USER, User
from app.repositories.course_repository import course_repository
from app.repositories.student_repository import student_repository
from app.repositories.user_repository import user_repository
from app.utils.audit import creation_audit
from app.utils.jwt import create_access_token
from app.utils.password import hash_password


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    """SQLite 외래키 강제 — SQLite ignores foreign keys unless asked."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 DB 파일."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    event.listen(eng.sync_engine, "connect", _enable_foreign_keys)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """테스트 본문에서 쓰는 DB 세션."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 새 세션을 엽니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _create_user(db: AsyncSession, email: str, password: str, role: str) -> User:
    user = await user_repository.add(db, User(
        email=email,
        first_name="Test",
        last_name=role,
        password_hash=hash_password(password),
        role=role,
        **creation_audit(),
    ))
    await db.commit()
    return user


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await _create_user(db, "admin@test.com", "admin123!", ROLE_ADMIN)


@pytest_asyncio.fixture
async def regular_user(db: AsyncSession) -> User:
    """일반 사용자를 생성합니다."""
    return await _create_user(db, "user@test.com", "user1234!", ROLE_USER)


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(user.id),
        "email": user.email,
        "userId": str(user.id),
        "role": user.role,
    })


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return make_token(admin_user)


@pytest.fixture
def user_token(regular_user: User) -> str:
    return make_token(regular_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_courses(db: AsyncSession) -> Callable[[int], Awaitable[list[Course]]]:
    """강좌 n개를 생성하는 팩토리 — "Course 1" .. "Course n", credits 3."""
    async def _make(count: int) -> list[Course]:
        courses: list[Course] = []
        for i in range(1, count + 1):
            course = Course(title=f"Course {i}", credits=3, **creation_audit())
            courses.append(await course_repository.add(db, course))
        await db.commit()
        return courses
    return _make


@pytest_asyncio.fixture
async def course(make_courses) -> Course:
    """테스트 강좌 1개."""
    return (await make_courses(1))[0]


@pytest_asyncio.fixture
async def student(db: AsyncSession) -> Student:
    """테스트 학생 1명."""
    s = await student_repository.add(db, Student(
        first_name="Ada",
        last_name="Lovelace",
        date_of_birth=date(2001, 12, 10),
        id_number="ID-0001",
        picture=None,
        **creation_audit(),
    ))
    await db.commit()
    return s
