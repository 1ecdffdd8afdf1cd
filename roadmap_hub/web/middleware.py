from __future__ import annotations

import logging
from secrets import token_urlsafe
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from roadmap_hub.logging_context import set_request_id
from roadmap_hub.preferences import CookiePreferenceStorage
from roadmap_hub.theme import DEFAULT_MODE, DEFAULT_THEME, Mode
from roadmap_hub.theme_store import DocumentSurface, ThemeStore

REQUEST_ID_HEADER = "X-Request-ID"

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def _request_fields(request: Request, event: str) -> dict[str, object]:
    return {"event": event, "method": request.method, "path": request.url.path}


def _selection_fields(request: Request) -> dict[str, object]:
    store = getattr(request.state, "theme_store", None)
    if store is None:
        return {}
    return {
        "theme_id": store.selection.theme_id,
        "mode": store.selection.mode.value,
        "persistent": store.persistent,
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Assigns a request id, echoes it back and logs each request's outcome.

    Completed requests also record the theme selection the page was rendered
    with, when a theme store was mounted further down the stack.
    """

    def __init__(
        self,
        app,
        *,
        log_requests: bool = True,
        skip_paths: tuple[str, ...] = (),
    ) -> None:
        super().__init__(app)
        self._log_requests = log_requests
        self._skip_paths = tuple(path for path in skip_paths if path)

    def _should_log(self, path: str) -> bool:
        if not self._log_requests:
            return False
        return not any(path.startswith(prefix) for prefix in self._skip_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or token_urlsafe(12)
        request.state.request_id = request_id
        set_request_id(request_id)
        should_log = self._should_log(request.url.path)
        started = time.perf_counter()

        if should_log:
            logger.info("request.started", extra=_request_fields(request, "request.started"))
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request.failed",
                extra={
                    **_request_fields(request, "request.failed"),
                    "duration_ms": _elapsed_ms(started),
                },
            )
            set_request_id(None)
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        if should_log:
            logger.info(
                "request.completed",
                extra={
                    **_request_fields(request, "request.completed"),
                    **_selection_fields(request),
                    "status_code": response.status_code,
                    "duration_ms": _elapsed_ms(started),
                },
            )
        set_request_id(None)
        return response


class ThemeStoreMiddleware(BaseHTTPMiddleware):
    """Mounts one rehydrated ``ThemeStore`` per request on ``request.state``."""

    def __init__(
        self,
        app,
        *,
        default_theme: str = DEFAULT_THEME,
        default_mode: Mode = DEFAULT_MODE,
        cookie_max_age_seconds: int = 365 * 24 * 60 * 60,
        cookie_secure: bool = False,
    ) -> None:
        super().__init__(app)
        self._default_theme = default_theme
        self._default_mode = default_mode
        self._cookie_max_age_seconds = cookie_max_age_seconds
        self._cookie_secure = cookie_secure

    async def dispatch(self, request: Request, call_next) -> Response:
        storage = CookiePreferenceStorage(
            request.cookies,
            max_age_seconds=self._cookie_max_age_seconds,
            secure=self._cookie_secure,
        )
        store = ThemeStore(
            storage,
            DocumentSurface(),
            default_theme=self._default_theme,
            default_mode=self._default_mode,
        )
        await store.initialize()
        request.state.theme_store = store

        response = await call_next(request)
        storage.flush(response)
        return response


def parse_skip_paths(raw_value: str) -> tuple[str, ...]:
    parts = [part.strip() for part in raw_value.split(",")]
    return tuple(part for part in parts if part)
