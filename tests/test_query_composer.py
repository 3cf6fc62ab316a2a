"""쿼리 컴포저 테스트 — 불변 조합, 필터, 정렬, 프로젝션, 실행.

Query composer tests — immutable composition, filters, ordering,
projection, and materialization.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.course import Course
from app.repositories.course_repository import course_repository
from app.schemas.course import CourseResponse


class TestComposition:
    """조합은 새 객체를 반환하고 I/O를 하지 않습니다."""

    def test_composition_returns_new_composer(self):
        base = course_repository.query()
        filtered = base.filter(Course.credits > 2)
        ordered = filtered.order_by(Course.id)

        assert filtered is not base
        assert ordered is not filtered
        assert base.statement.whereclause is None
        assert not filtered.is_ordered
        assert ordered.is_ordered

    def test_projection_selects_only_schema_columns(self):
        projected = course_repository.query().project(CourseResponse)
        names = [column.name for column in projected.statement.selected_columns]
        assert names == ["id", "title", "credits"]

    def test_explicit_projection_columns(self):
        projected = course_repository.query().project(dict, Course.id, Course.title)
        names = [column.name for column in projected.statement.selected_columns]
        assert names == ["id", "title"]


class TestMaterialization:
    """실행 결과 검증."""

    async def test_filters_conjoin(self, db: AsyncSession, make_courses):
        courses = await make_courses(5)
        rows = await (
            course_repository.query()
            .filter(Course.id >= courses[1].id)
            .filter(Course.id <= courses[3].id)
            .order_by(Course.id)
            .all(db)
        )
        assert [c.id for c in rows] == [courses[1].id, courses[2].id, courses[3].id]
        assert all(isinstance(c, Course) for c in rows)

    async def test_order_by_descending(self, db: AsyncSession, make_courses):
        courses = await make_courses(3)
        rows = await course_repository.query().order_by(Course.id.desc()).all(db)
        assert [c.id for c in rows] == [c.id for c in reversed(courses)]

    async def test_projection_builds_schema_instances(self, db: AsyncSession, course):
        rows = await course_repository.query().project(CourseResponse).all(db)
        assert rows == [CourseResponse(id=course.id, title="Course 1", credits=3)]

    async def test_first_and_one_or_none(self, db: AsyncSession, make_courses):
        courses = await make_courses(2)
        query = course_repository.query().order_by(Course.id.desc())
        first = await query.first(db)
        assert first.id == courses[1].id

        single = await query.filter(Course.id == courses[0].id).project(CourseResponse).one_or_none(db)
        assert single == CourseResponse(id=courses[0].id, title="Course 1", credits=3)

        missing = await query.filter(Course.id == -1).one_or_none(db)
        assert missing is None

    async def test_count_ignores_ordering(self, db: AsyncSession, make_courses):
        await make_courses(4)
        query = course_repository.query().order_by(Course.title).project(CourseResponse)
        assert await query.count(db) == 4

    async def test_slice_windows_ordered_rows(self, db: AsyncSession, make_courses):
        courses = await make_courses(5)
        rows = await course_repository.query().order_by(Course.id).slice(db, 1, 2)
        assert [c.id for c in rows] == [courses[1].id, courses[2].id]

    async def test_composer_is_restartable(self, db: AsyncSession, make_courses):
        await make_courses(2)
        query = course_repository.query().order_by(Course.id)
        assert len(await query.all(db)) == 2
        await make_courses(1)
        assert len(await query.all(db)) == 3
