"""Axiom 로깅 미들웨어 테스트 — 마스킹, 에러 사유 추출, 이벤트 전송.

Axiom logging middleware tests — masking, error detail extraction and the
event shipped per request.
"""

from typing import Any

from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient

from app.middleware.axiom_logging import (
    AxiomLoggingMiddleware,
    extract_error_detail,
    mask_sensitive,
)


class _RecordingClient:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    def __init__(self, fail: bool = False) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.fail = fail

    def ingest_events(self, dataset: str, events: list[dict[str, Any]]) -> None:
        if self.fail:
            raise ConnectionError("axiom unreachable")
        self.events.extend((dataset, event) for event in events)


def _build_app(recorder: _RecordingClient) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=recorder)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/items/{item_id}")
    async def get_item(item_id: int) -> dict:
        if item_id == 0:
            raise HTTPException(status_code=404, detail="item not found")
        return {"id": item_id}

    @app.post("/login")
    async def login(body: dict) -> dict:
        return {"ok": True}

    return app


class TestMaskSensitive:

    def test_masks_nested_keys(self):
        masked = mask_sensitive({
            "email": "a@b.com",
            "password": "hunter2",
            "nested": {"apiKey": "k", "list": [{"token": "t", "keep": 1}]},
        })
        assert masked == {
            "email": "a@b.com",
            "password": "***",
            "nested": {"apiKey": "***", "list": [{"token": "***", "keep": 1}]},
        }

    def test_depth_is_bounded(self):
        deep: Any = "leaf"
        for _ in range(10):
            deep = {"d": deep}
        masked = mask_sensitive(deep)
        for _ in range(6):
            masked = masked["d"]
        assert masked == "..."


class TestExtractErrorDetail:

    def test_fastapi_detail(self):
        assert extract_error_detail(b'{"detail": "course not found!"}') == "course not found!"

    def test_validation_list_is_serialized(self):
        detail = extract_error_detail(b'{"detail": [{"loc": ["body", "title"]}]}')
        assert "title" in detail

    def test_non_json_body(self):
        assert extract_error_detail(b"plain failure") == "plain failure"

    def test_long_detail_truncated(self):
        detail = extract_error_detail(('{"detail": "%s"}' % ("x" * 800)).encode())
        assert detail.endswith("...")
        assert len(detail) == 503


class TestMiddleware:

    async def test_success_event(self):
        recorder = _RecordingClient()
        transport = ASGITransport(app=_build_app(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.get("/items/3", params={"q": "x"})
        assert res.status_code == 200

        assert len(recorder.events) == 1
        _, event = recorder.events[0]
        assert event["method"] == "GET"
        assert event["path"] == "/items/3"
        assert event["status_code"] == 200
        assert event["query_params"] == {"q": "x"}
        assert "error" not in event
        assert event["duration_ms"] >= 0

    async def test_error_body_is_preserved(self):
        recorder = _RecordingClient()
        transport = ASGITransport(app=_build_app(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.get("/items/0")
        assert res.status_code == 404
        assert res.json() == {"detail": "item not found"}
        assert recorder.events[0][1]["error"] == "item not found"

    async def test_request_body_is_masked(self):
        recorder = _RecordingClient()
        transport = ASGITransport(app=_build_app(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.post("/login", json={"email": "a@b.com", "password": "secret!"})
        assert res.status_code == 200
        assert recorder.events[0][1]["request_body"] == {"email": "a@b.com", "password": "***"}

    async def test_skipped_paths_are_not_logged(self):
        recorder = _RecordingClient()
        transport = ASGITransport(app=_build_app(recorder))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            await ac.get("/health")
        assert recorder.events == []

    async def test_ingest_failure_does_not_break_request(self):
        transport = ASGITransport(app=_build_app(_RecordingClient(fail=True)))
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            res = await ac.get("/items/1")
        assert res.status_code == 200
