"""쿼리 컴포저 — 지연 실행되는 조회 조합기.

Query Composer — Lazy, immutable builder over one entity table.

Every composition step (``filter``, ``order_by``, ``project``) returns a new
composer wrapping a new SQLAlchemy ``Select``; nothing is sent to the
database until one of the materializing coroutines (``all``, ``first``,
``one_or_none``, ``count``, ``slice``) is awaited with a session. Each of
those performs exactly one round trip.

Usage:
    query = (
        course_repository.query()
        .filter(Course.credits >= 3)
        .order_by(Course.id)
        .project(CourseResponse)
    )
    courses: list[CourseResponse] = await query.all(db)
"""

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")
R = TypeVar("R")


class QueryComposer(Generic[T]):
    """엔티티 또는 프로젝션 결과에 대한 지연 쿼리.

    Lazy query over an entity table, optionally projected into a
    lighter-weight shape. Instances are never mutated.

    Attributes:
        model: 대상 ORM 모델 클래스 (ORM model the query reads from)
    """

    def __init__(
        self,
        model: type[Any],
        statement: Select | None = None,
        projector: Callable[..., T] | None = None,
        ordered: bool = False,
    ) -> None:
        self.model: type[Any] = model
        self._statement: Select = statement if statement is not None else select(model)
        self._projector: Callable[..., T] | None = projector
        self._ordered: bool = ordered

    def _derive(
        self,
        statement: Select,
        projector: Callable[..., Any] | None = None,
        ordered: bool | None = None,
    ) -> "QueryComposer[Any]":
        return QueryComposer(
            self.model,
            statement,
            projector if projector is not None else self._projector,
            self._ordered if ordered is None else ordered,
        )

    @property
    def statement(self) -> Select:
        """조합된 SELECT 문 (The composed, unexecuted SELECT)."""
        return self._statement

    @property
    def is_ordered(self) -> bool:
        """정렬 기준이 지정되었는지 여부 (Whether ``order_by`` has been applied)."""
        return self._ordered

    def filter(self, *criteria: Any) -> "QueryComposer[T]":
        """조건을 추가합니다. 여러 조건은 AND로 결합됩니다.

        Narrow the query by boolean criteria over entity columns.
        Repeated calls conjoin.
        """
        return self._derive(self._statement.where(*criteria))

    def order_by(self, *keys: Any) -> "QueryComposer[T]":
        """정렬 기준을 지정합니다 — 페이지네이션 전에 필요.

        Establish the sort order. Paging relies on the keys being a total
        order (e.g. ending with the primary key).
        """
        return self._derive(self._statement.order_by(*keys), ordered=True)

    def project(self, into: Callable[..., R], *columns: Any) -> "QueryComposer[R]":
        """결과를 경량 형태로 변환합니다.

        Select only the given columns and build ``into(**row)`` for each row.
        When no columns are given, the columns whose names match the fields of
        ``into`` (a pydantic model) are used, so the full entity is never
        loaded.

        Args:
            into: 결과 생성자, 보통 Pydantic 응답 스키마
                  (Row constructor, usually a pydantic response schema)
            columns: 선택할 컬럼 (Columns to select, optional)
        """
        if not columns:
            field_names: Sequence[str] = list(getattr(into, "model_fields", {}))
            columns = tuple(
                getattr(self.model, name)
                for name in field_names
                if name in self.model.__table__.columns
            )
        statement: Select = self._statement.with_only_columns(*columns, maintain_column_froms=True)
        return self._derive(statement, projector=into)

    def _convert(self, rows: Sequence[Any]) -> list[T]:
        if self._projector is None:
            return list(rows)
        return [self._projector(**row._mapping) for row in rows]

    async def _fetch(self, db: AsyncSession, statement: Select) -> list[T]:
        result = await db.execute(statement)
        if self._projector is None:
            return self._convert(result.scalars().all())
        return self._convert(result.all())

    async def all(self, db: AsyncSession) -> list[T]:
        """모든 결과를 조회합니다 (One round trip, all matching rows)."""
        return await self._fetch(db, self._statement)

    async def slice(self, db: AsyncSession, offset: int, limit: int) -> list[T]:
        """OFFSET/LIMIT 구간을 조회합니다 (One round trip, a bounded window)."""
        return await self._fetch(db, self._statement.offset(offset).limit(limit))

    async def first(self, db: AsyncSession) -> T | None:
        """첫 번째 결과 또는 None (First row in order, or None)."""
        rows: list[T] = await self._fetch(db, self._statement.limit(1))
        return rows[0] if rows else None

    async def one_or_none(self, db: AsyncSession) -> T | None:
        """단일 결과 또는 None — 2건 이상이면 예외.

        Single row or None. Raises ``sqlalchemy.exc.MultipleResultsFound``
        when more than one row matches.
        """
        result = await db.execute(self._statement)
        if self._projector is None:
            return result.scalar_one_or_none()
        row = result.one_or_none()
        return None if row is None else self._projector(**row._mapping)

    async def count(self, db: AsyncSession) -> int:
        """조건에 맞는 전체 개수 — 정렬/오프셋/리밋 무시.

        Count matching rows with the same filters, ignoring ordering,
        offset and limit.
        """
        inner: Select = self._statement.order_by(None).limit(None).offset(None)
        count_query: Select = select(func.count()).select_from(inner.subquery())
        return (await db.execute(count_query)).scalar() or 0
