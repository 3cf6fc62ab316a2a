"""커스텀 예외 클래스 모듈.

Custom exception classes module.
HTTP-facing errors are pre-configured HTTPException subclasses so services
can raise them without specifying status codes at each call site.
Store-level failures use ConstraintViolationError, which is not an
HTTPException; the application handler turns it into an opaque 500.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("course not found!")
    raise BadRequestError("Route ID and course ID do not match.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 대상 행이 없을 때 사용.

    404 Not Found exception.
    Raised by services when a lookup returns nothing or an update/delete
    affected zero rows.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 Conflict 예외 — 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when registering an account whose email is already taken.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 시 사용.

    403 Forbidden exception.
    Raised when the authenticated user lacks the required role.

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised for missing, invalid, or expired tokens and for bad credentials.
    The message never reveals which credential factor was wrong.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised before any store call when caller-supplied identifiers disagree
    (e.g. route id vs. payload id).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConstraintViolationError(Exception):
    """저장소 제약 조건 위반 — 고유키/외래키 규칙 위반.

    Raised by the generic repository when the store rejects a statement
    because of a uniqueness or foreign-key rule. The original driver error
    is kept on ``orig`` and chained as ``__cause__``.

    Args:
        entity: 대상 엔티티 이름 (Name of the entity being written)
        orig: 원본 드라이버 예외 (Original store exception)
    """

    def __init__(self, entity: str, orig: BaseException | None = None) -> None:
        super().__init__(f"Constraint violation while writing {entity}")
        self.entity: str = entity
        self.orig: BaseException | None = orig
