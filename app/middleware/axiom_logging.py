"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Builds one structured event per request (method, path, params, masked body,
status, duration, error reason) and ships it to Axiom. When no Axiom token
is configured the middleware is a pass-through.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 필드 패턴 — Keys whose values are never logged
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_BODY_METHODS = {"POST", "PUT", "PATCH"}
_MAX_DETAIL = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def extract_error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유 추출 — FastAPI ``detail`` if present, else raw text."""
    try:
        parsed: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL]
    detail: Any = parsed.get("detail", parsed) if isinstance(parsed, dict) else parsed
    text: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    return text if len(text) <= _MAX_DETAIL else text[:_MAX_DETAIL] + "..."


async def _read_request_body(request: Request) -> Any:
    if request.method not in _BODY_METHODS:
        return None
    body: bytes = await request.body()
    if not body:
        return None
    try:
        return mask_sensitive(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request/response pair to Axiom.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _ship(self, event: dict[str, Any]) -> None:
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 또는 Axiom 미설정 시 패스스루 — Pass through
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time: float = time.perf_counter()
        event: dict[str, Any] = {"method": request.method, "path": request.url.path}
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))
        request_body: Any = await _read_request_body(request)
        if request_body is not None:
            event["request_body"] = request_body

        event["status_code"] = 500
        try:
            response: Response = await call_next(request)
            event["status_code"] = response.status_code

            # 에러 응답은 본문을 소비한 뒤 재구성 — Consume then re-wrap error bodies
            if response.status_code >= 400:
                body: bytes = b""
                async for chunk in response.body_iterator:
                    body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = extract_error_detail(body)
                response = Response(
                    content=body,
                    status_code=response.status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            return response
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            self._ship(event)
