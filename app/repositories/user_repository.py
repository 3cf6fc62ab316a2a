"""사용자 레포지토리 — 자격 증명 조회.

User Repository — Credential lookups for the token issuer.
Extends GenericRepository with an email lookup.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import GenericRepository


class UserRepository(GenericRepository[User]):
    """users 테이블에 대한 레포지토리.

    Repository handling queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 사용자를 조회합니다 (대소문자 무시).

        Retrieve a user by email, case-insensitively.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 조회할 이메일 (Email to look up)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        return await self.query().filter(User.email == email.strip().lower()).one_or_none(db)


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
