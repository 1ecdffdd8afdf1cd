"""Active theme/mode selection for one browser.

The store is the only writer of the document surface: presentation code reads
``store.selection`` and ``store.effects`` and calls ``select`` or
``toggle_mode``; applying the palette and persisting preferences happen as
side effects of those calls.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from starlette.requests import Request

from roadmap_hub.preferences import (
    MODE_STORAGE_KEY,
    THEME_STORAGE_KEY,
    PreferenceStorage,
    PreferenceStorageError,
)
from roadmap_hub.theme import (
    DEFAULT_MODE,
    DEFAULT_THEME,
    THEMES,
    Mode,
    Theme,
    get_theme,
    parse_mode,
)

logger = logging.getLogger(__name__)

MODE_ATTRIBUTE = "data-mode"


class ThemeStoreNotMountedError(RuntimeError):
    """Raised when the theme store is used outside the request lifecycle."""


@dataclass(frozen=True)
class ActiveSelection:
    theme_id: str
    mode: Mode


class ThemeEffects(Protocol):
    def apply_palette(self, theme: Theme) -> None: ...

    def apply_mode(self, mode: Mode) -> None: ...

    @property
    def variables(self) -> dict[str, str]: ...


class DocumentSurface:
    """Document-level style scope: root CSS variables plus the mode attribute."""

    def __init__(self) -> None:
        self._variables: dict[str, str] = {}
        self._attributes: dict[str, str] = {}

    def apply_palette(self, theme: Theme) -> None:
        self._variables.clear()
        self._variables.update(theme.colors)

    def apply_mode(self, mode: Mode) -> None:
        self._attributes[MODE_ATTRIBUTE] = mode.value

    @property
    def variables(self) -> dict[str, str]:
        return dict(self._variables)

    @property
    def mode(self) -> str | None:
        return self._attributes.get(MODE_ATTRIBUTE)

    @property
    def inline_style(self) -> str:
        return "; ".join(f"{name}: {value}" for name, value in sorted(self._variables.items()))


class ThemeStore:
    def __init__(
        self,
        storage: PreferenceStorage,
        effects: ThemeEffects,
        *,
        default_theme: str = DEFAULT_THEME,
        default_mode: Mode = DEFAULT_MODE,
    ) -> None:
        if default_theme not in THEMES:
            logger.warning(
                "theme.default_unknown",
                extra={"event": "theme.default_unknown", "theme_id": default_theme},
            )
            default_theme = DEFAULT_THEME
        self._storage = storage
        self._effects = effects
        self._theme_id = default_theme
        self._mode = default_mode
        self._ready = False
        self._persistent = True

    @property
    def selection(self) -> ActiveSelection:
        return ActiveSelection(theme_id=self._theme_id, mode=self._mode)

    @property
    def theme(self) -> Theme:
        return THEMES[self._theme_id]

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def persistent(self) -> bool:
        return self._persistent

    @property
    def effects(self) -> ThemeEffects:
        return self._effects

    async def initialize(self) -> ActiveSelection:
        if self._ready:
            return self.selection

        saved_theme = await self._read(THEME_STORAGE_KEY)
        saved_mode = await self._read(MODE_STORAGE_KEY)
        if get_theme(saved_theme) is not None:
            self._theme_id = saved_theme
        elif saved_theme is not None:
            logger.debug(
                "theme.rehydrate_unknown_theme",
                extra={"event": "theme.rehydrate_unknown_theme", "theme_id": saved_theme},
            )
        parsed_mode = parse_mode(saved_mode)
        if parsed_mode is not None:
            self._mode = parsed_mode

        self._ready = True
        self._effects.apply_palette(self.theme)
        self._effects.apply_mode(self._mode)
        await self._persist_theme()
        await self._persist_mode()
        return self.selection

    async def select(self, theme_id: str) -> ActiveSelection:
        if theme_id not in THEMES:
            logger.debug(
                "theme.select_ignored",
                extra={"event": "theme.select_ignored", "theme_id": theme_id},
            )
            return self.selection
        self._theme_id = theme_id
        if self._ready:
            self._effects.apply_palette(self.theme)
            await self._persist_theme()
        return self.selection

    async def toggle_mode(self) -> Mode:
        self._mode = self._mode.toggled()
        if self._ready:
            self._effects.apply_mode(self._mode)
            await self._persist_mode()
        return self._mode

    async def _read(self, key: str) -> str | None:
        if not self._persistent:
            return None
        try:
            return await self._storage.read(key)
        except PreferenceStorageError:
            self._degrade(key, operation="read")
            return None

    async def _write(self, key: str, value: str) -> None:
        if not self._persistent:
            return
        try:
            await self._storage.write(key, value)
        except PreferenceStorageError:
            self._degrade(key, operation="write")

    async def _persist_theme(self) -> None:
        await self._write(THEME_STORAGE_KEY, self._theme_id)

    async def _persist_mode(self) -> None:
        await self._write(MODE_STORAGE_KEY, self._mode.value)

    def _degrade(self, key: str, *, operation: str) -> None:
        self._persistent = False
        logger.warning(
            "theme.storage_unavailable",
            exc_info=True,
            extra={
                "event": "theme.storage_unavailable",
                "storage_key": key,
                "operation": operation,
            },
        )


def use_theme(request: Request) -> ThemeStore:
    store = getattr(request.state, "theme_store", None)
    if store is None:
        raise ThemeStoreNotMountedError(
            "use_theme() called outside ThemeStoreMiddleware; install the middleware first."
        )
    return store
