"""강좌 API 테스트 — 목록 페이지, 상세, 생성, 수정, 삭제.

Course API tests — Paged list, detail, create, update and delete.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

COURSES = "/api/courses"


class TestListCourses:
    """강좌 목록 페이지 조회."""

    async def test_first_page(self, client: AsyncClient, make_courses):
        courses = await make_courses(25)
        res = await client.get(COURSES, params={"pageNumber": 1, "pageSize": 10})
        assert res.status_code == 200
        data = res.json()
        assert [item["id"] for item in data["items"]] == [c.id for c in courses[:10]]
        assert data["pageNumber"] == 1
        assert data["pageSize"] == 10
        assert data["totalCount"] == 25
        assert data["totalPages"] == 3

    async def test_last_partial_page_and_past_end(self, client: AsyncClient, make_courses):
        await make_courses(25)
        third = (await client.get(COURSES, params={"pageNumber": 3, "pageSize": 10})).json()
        assert len(third["items"]) == 5

        fourth = (await client.get(COURSES, params={"pageNumber": 4, "pageSize": 10})).json()
        assert fourth["items"] == []
        assert fourth["totalCount"] == 25

    async def test_defaults_when_omitted(self, client: AsyncClient, make_courses):
        await make_courses(12)
        data = (await client.get(COURSES)).json()
        assert data["pageNumber"] == 1
        assert data["pageSize"] == 10
        assert len(data["items"]) == 10

    async def test_oversized_page_clamped(self, client: AsyncClient, make_courses):
        await make_courses(3)
        data = (await client.get(COURSES, params={"pageSize": 100000})).json()
        assert data["pageSize"] == 100
        assert len(data["items"]) == 3

    async def test_item_shape(self, client: AsyncClient, course):
        data = (await client.get(COURSES)).json()
        assert data["items"] == [{"id": course.id, "title": "Course 1", "credits": 3}]


class TestGetCourse:
    """강좌 상세 조회."""

    async def test_get_existing(self, client: AsyncClient, course):
        res = await client.get(f"{COURSES}/{course.id}")
        assert res.status_code == 200
        assert res.json() == {"id": course.id, "title": "Course 1", "credits": 3}

    async def test_get_missing(self, client: AsyncClient):
        res = await client.get(f"{COURSES}/999")
        assert res.status_code == 404


class TestCreateCourse:
    """강좌 생성."""

    async def test_create(self, client: AsyncClient, admin_token):
        res = await client.post(
            COURSES, json={"title": "Algebra", "credits": 4}, headers=auth_header(admin_token)
        )
        assert res.status_code == 201
        created = res.json()
        assert created["title"] == "Algebra"
        assert res.headers["Location"] == f"{COURSES}/{created['id']}"

        fetched = await client.get(res.headers["Location"])
        assert fetched.json() == created

    async def test_create_invalid_body(self, client: AsyncClient, admin_token):
        res = await client.post(
            COURSES, json={"title": "", "credits": -1}, headers=auth_header(admin_token)
        )
        assert res.status_code == 422


class TestUpdateCourse:
    """강좌 수정."""

    async def test_update(self, client: AsyncClient, admin_token, course):
        res = await client.put(
            f"{COURSES}/{course.id}",
            json={"id": course.id, "title": "Renamed", "credits": 5},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 204
        fetched = (await client.get(f"{COURSES}/{course.id}")).json()
        assert fetched == {"id": course.id, "title": "Renamed", "credits": 5}

    async def test_id_mismatch(self, client: AsyncClient, admin_token, course):
        res = await client.put(
            f"{COURSES}/{course.id}",
            json={"id": course.id + 1, "title": "X", "credits": 1},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 400
        assert res.json()["detail"] == "Route ID and course ID do not match."

        unchanged = (await client.get(f"{COURSES}/{course.id}")).json()
        assert unchanged["title"] == "Course 1"

    async def test_update_missing(self, client: AsyncClient, admin_token):
        res = await client.put(
            f"{COURSES}/7",
            json={"id": 7, "title": "X", "credits": 1},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 404
        assert res.json()["detail"] == "course with Id: 7 is missing"


class TestDeleteCourse:
    """강좌 삭제."""

    async def test_delete_then_missing(self, client: AsyncClient, admin_token, course):
        first = await client.delete(f"{COURSES}/{course.id}", headers=auth_header(admin_token))
        assert first.status_code == 204

        second = await client.delete(f"{COURSES}/{course.id}", headers=auth_header(admin_token))
        assert second.status_code == 404

        assert (await client.get(f"{COURSES}/{course.id}")).status_code == 404

    async def test_delete_enrolled_course_is_server_error(
        self, client: AsyncClient, admin_token, course, student
    ):
        enrolled = await client.post(
            "/api/enrollments",
            json={"courseId": course.id, "studentId": student.id},
            headers=auth_header(admin_token),
        )
        assert enrolled.status_code == 201

        res = await client.delete(f"{COURSES}/{course.id}", headers=auth_header(admin_token))
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        assert (await client.get(f"{COURSES}/{course.id}")).status_code == 200
