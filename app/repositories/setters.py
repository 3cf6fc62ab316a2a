"""부분 업데이트 필드 설정 빌더.

Field setter builder for set-based partial updates.
Accumulates ``(field, value)`` pairs that the generic repository turns into
a single ``UPDATE ... SET`` statement.

Usage:
    setters = FieldSetters().set("title", "X").set("credits", 4)
    await course_repository.update_where(db, [Course.id == 7], setters)
"""

from collections.abc import Iterator, Mapping
from typing import Any


class FieldSetters(Mapping[str, Any]):
    """업데이트할 필드/값 쌍의 모음.

    Ordered collection of field assignments. Setting the same field twice
    keeps the last value. Behaves as a read-only mapping once built.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def set(self, field: str, value: Any) -> "FieldSetters":
        """필드 값을 지정하고 빌더 자신을 반환합니다 (Chainable)."""
        self._values[field] = value
        return self

    def __getitem__(self, field: str) -> Any:
        return self._values[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldSetters({self._values!r})"
