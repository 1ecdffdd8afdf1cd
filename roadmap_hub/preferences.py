"""Per-browser preference storage.

Preferences are string-keyed, string-valued entries that live in the browser.
The store reads them through :class:`PreferenceStorage` so tests can swap in
an in-memory or failing backend.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Protocol

from starlette.responses import Response

THEME_STORAGE_KEY: Final[str] = "js-roadmap-theme"
MODE_STORAGE_KEY: Final[str] = "js-roadmap-mode"

# Browsers cap a single cookie (name + value + attributes) at 4096 bytes.
MAX_COOKIE_VALUE_BYTES: Final[int] = 3800


class PreferenceStorageError(Exception):
    """Raised when preference storage cannot be read or written."""


class PreferenceStorage(Protocol):
    async def read(self, key: str) -> str | None: ...

    async def write(self, key: str, value: str) -> None: ...


class CookiePreferenceStorage:
    def __init__(
        self,
        cookies: Mapping[str, str],
        *,
        max_age_seconds: int,
        secure: bool = False,
    ) -> None:
        self._cookies = dict(cookies)
        self._pending: dict[str, str] = {}
        self._max_age_seconds = max_age_seconds
        self._secure = secure

    async def read(self, key: str) -> str | None:
        return self._cookies.get(key)

    async def write(self, key: str, value: str) -> None:
        if len(value.encode("utf-8")) > MAX_COOKIE_VALUE_BYTES:
            raise PreferenceStorageError(f"Preference {key!r} exceeds cookie size limit.")
        if not value.isprintable() or ";" in value:
            raise PreferenceStorageError(f"Preference {key!r} is not cookie-safe.")
        if self._cookies.get(key) == value and key not in self._pending:
            return
        self._cookies[key] = value
        self._pending[key] = value

    @property
    def pending(self) -> dict[str, str]:
        return dict(self._pending)

    def flush(self, response: Response) -> None:
        for key, value in self._pending.items():
            response.set_cookie(
                key,
                value,
                max_age=self._max_age_seconds,
                path="/",
                secure=self._secure,
                httponly=True,
                samesite="lax",
            )
        self._pending.clear()
