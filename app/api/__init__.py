"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint router into ``api_router``,
mounted under ``/api`` by the application.

Included routers:
    - authentication: 로그인/회원가입 (Login and registration)
    - courses: 강좌 관리 (Course management)
    - students: 학생 관리 (Student management)
    - enrollments: 수강 등록 관리 (Enrollment management)
"""

from fastapi import APIRouter

from app.api.authentication import router as authentication_router
from app.api.courses import router as courses_router
from app.api.enrollments import router as enrollments_router
from app.api.students import router as students_router

api_router: APIRouter = APIRouter()

api_router.include_router(authentication_router, prefix="/authentication", tags=["Authentication"])
api_router.include_router(courses_router, prefix="/courses", tags=["Courses"])
api_router.include_router(students_router, prefix="/students", tags=["Students"])
api_router.include_router(enrollments_router, prefix="/enrollments", tags=["Enrollments"])
