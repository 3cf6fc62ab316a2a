"""제네릭 레포지토리 — 모든 엔티티 레포지토리의 공통 구현.

Generic Repository — Uniform persistence entry point for every entity type.
Provides lazy querying, insert, set-based partial update, and delete by id.

Design constraints:
    - 상태 없음: 세션은 호출마다 인자로 전달되며 저장하지 않음
      (Stateless: the session is passed per call and never retained)
    - update_where는 행을 읽지 않고 단일 UPDATE 문으로 처리
      (update_where never loads rows; it issues one UPDATE statement)
    - 낙관적 동시성 토큰 없음 — 같은 행에 대한 동시 수정은 마지막 문장이 반영됨
      (No optimistic concurrency token; concurrent same-row updates are
      last-statement-wins at the store's statement-level atomicity)
    - 재시도 없음: 저장소 오류는 즉시 호출자에게 전달
      (No retries; store failures propagate immediately)

Usage:
    course_repository: GenericRepository[Course] = GenericRepository(Course)
    course = await course_repository.add(db, Course(title="Algebra", credits=3, ...))
"""

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.models.audit import AUDIT_FIELDS
from app.repositories.query import QueryComposer
from app.repositories.setters import FieldSetters
from app.utils.audit import update_audit
from app.utils.exceptions import ConstraintViolationError

# 제네릭 타입 변수 — 정수 id 컬럼을 가진 SQLAlchemy 모델
# Generic type variable representing a SQLAlchemy model with an integer ``id``
ModelType = TypeVar("ModelType", bound=Base)


class GenericRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic repository parameterized by entity type.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 관리할 SQLAlchemy 모델 클래스, ``id`` 컬럼 필수
                   (SQLAlchemy model class; must expose an ``id`` column)

        Raises:
            TypeError: 모델에 id 컬럼이 없을 때 (Model has no ``id`` column)
        """
        if "id" not in model.__table__.columns:
            raise TypeError(f"{model.__name__} has no 'id' column")
        self.model: type[ModelType] = model

    def query(self) -> QueryComposer[ModelType]:
        """조회 시작점 — I/O 없음.

        Starting point for reads. Returns an unevaluated composer.
        """
        return QueryComposer(self.model)

    async def add(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """새 엔티티를 저장합니다.

        Persist a new entity. The store assigns ``id``; the same instance is
        returned with ``id`` populated.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: id가 비어 있는 새 엔티티 (New entity without an id)

        Returns:
            ModelType: id가 채워진 엔티티 (The entity with ``id`` populated)

        Raises:
            ConstraintViolationError: 고유키/외래키 위반 (Uniqueness or FK rule rejected the insert)
        """
        db.add(entity)
        try:
            await db.flush()
        except IntegrityError as exc:
            raise ConstraintViolationError(self.model.__name__, exc.orig) from exc
        await db.refresh(entity)
        return entity

    def _build_values(self, setters: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = dict(setters)
        if not values:
            raise ValueError("update_where requires at least one field setter")

        columns = self.model.__table__.columns
        unknown: list[str] = [name for name in values if name not in columns]
        if unknown:
            raise ValueError(f"Unknown {self.model.__name__} fields: {', '.join(sorted(unknown))}")
        if "id" in values:
            raise ValueError("The id of an existing row cannot be changed")
        protected: list[str] = sorted(AUDIT_FIELDS.intersection(values))
        if protected:
            raise ValueError(f"Audit fields are managed by the repository: {', '.join(protected)}")
        return values

    async def update_where(
        self,
        db: AsyncSession,
        criteria: Iterable[Any],
        setters: FieldSetters | Mapping[str, Any],
        actor: str | None = None,
    ) -> int:
        """조건에 맞는 행의 지정 필드만 단일 UPDATE 문으로 수정합니다.

        Set-based partial update. Issues exactly one
        ``UPDATE <table> SET <setters> WHERE <criteria>`` evaluated by the
        store; matching rows are never loaded. Fields not named in
        ``setters`` are left untouched. Audit columns cannot be named in
        ``setters``; when ``actor`` is given, ``updated_at`` is set to the
        current time and ``updated_by`` to ``actor`` in the same statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            criteria: WHERE 조건 목록 (Filter criteria, conjoined)
            setters: 변경할 필드/값 (Fields to assign)
            actor: 수정 행위자, 지정 시 수정 감사 필드 기록 (Actor stamped into the update audit fields)

        Returns:
            int: 실제로 수정된 행 수, 일치 없으면 0 (Rows modified; 0 if none matched)

        Raises:
            ValueError: 빈 setter, 알 수 없는 필드, id 또는 감사 필드 지정
                        (Empty setters, unknown field, id or audit field), before any I/O
            ConstraintViolationError: 고유키/외래키 위반 (Store rejected the new values)
        """
        values: dict[str, Any] = self._build_values(setters)
        if actor is not None:
            values.update(update_audit(actor))
        stmt = (
            update(self.model)
            .where(*criteria)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
        except IntegrityError as exc:
            raise ConstraintViolationError(self.model.__name__, exc.orig) from exc
        return result.rowcount

    async def delete_by_id(self, db: AsyncSession, record_id: int) -> int:
        """id로 행을 삭제합니다 — 멱등.

        Delete the row with the given identity in a single statement.
        Idempotent: deleting a missing id returns 0 without error.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 행의 id (Identity of the row to delete)

        Returns:
            int: 삭제된 행 수, 0 또는 1 (Rows removed: 0 or 1)

        Raises:
            ConstraintViolationError: 다른 행이 참조 중일 때 (Row is still referenced)
        """
        stmt = (
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
        except IntegrityError as exc:
            raise ConstraintViolationError(self.model.__name__, exc.orig) from exc
        return result.rowcount
