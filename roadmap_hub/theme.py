from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final


class ThemeRegistryError(ValueError):
    """Raised when a theme definition does not carry the shared variable set."""


class Mode(str, Enum):
    DARK = "dark"
    LIGHT = "light"

    def toggled(self) -> Mode:
        return Mode.LIGHT if self is Mode.DARK else Mode.DARK


DEFAULT_MODE: Final[Mode] = Mode.DARK


def parse_mode(candidate: str | None) -> Mode | None:
    """Return the mode for the exact literals ``dark``/``light``, else ``None``."""
    if candidate == Mode.DARK.value:
        return Mode.DARK
    if candidate == Mode.LIGHT.value:
        return Mode.LIGHT
    return None


@dataclass(frozen=True)
class Theme:
    id: str
    name: str
    emoji: str
    description: str
    preview: tuple[str, ...]
    colors: Mapping[str, str]


def _theme(
    theme_id: str,
    *,
    name: str,
    emoji: str,
    description: str,
    preview: tuple[str, ...],
    colors: dict[str, str],
) -> Theme:
    return Theme(
        id=theme_id,
        name=name,
        emoji=emoji,
        description=description,
        preview=preview,
        colors=MappingProxyType(dict(colors)),
    )


_THEME_LIST: Final[tuple[Theme, ...]] = (
    _theme(
        "emerald-forest",
        name="Emerald Forest",
        emoji="🌲",
        description="Calm greens with a fresh, focused feel.",
        preview=("#10b981", "#059669", "#34d399", "#064e3b"),
        colors={
            "--accent": "#10b981",
            "--accent-hover": "#059669",
            "--accent-light": "#34d399",
            "--accent-glow": "rgba(16, 185, 129, 0.25)",
            "--gradient-start": "#10b981",
            "--gradient-end": "#06b6d4",
            "--link": "#34d399",
        },
    ),
    _theme(
        "slate-ocean",
        name="Slate Ocean",
        emoji="🌊",
        description="Deep blues for long reading sessions.",
        preview=("#3b82f6", "#2563eb", "#60a5fa", "#1e3a8a"),
        colors={
            "--accent": "#3b82f6",
            "--accent-hover": "#2563eb",
            "--accent-light": "#60a5fa",
            "--accent-glow": "rgba(59, 130, 246, 0.25)",
            "--gradient-start": "#3b82f6",
            "--gradient-end": "#8b5cf6",
            "--link": "#60a5fa",
        },
    ),
    _theme(
        "midnight-purple",
        name="Midnight Purple",
        emoji="🔮",
        description="Rich violets with a late-night vibe.",
        preview=("#8b5cf6", "#7c3aed", "#a78bfa", "#4c1d95"),
        colors={
            "--accent": "#8b5cf6",
            "--accent-hover": "#7c3aed",
            "--accent-light": "#a78bfa",
            "--accent-glow": "rgba(139, 92, 246, 0.25)",
            "--gradient-start": "#8b5cf6",
            "--gradient-end": "#ec4899",
            "--link": "#a78bfa",
        },
    ),
    _theme(
        "sunset-amber",
        name="Sunset Amber",
        emoji="🌅",
        description="Warm oranges and golds.",
        preview=("#f59e0b", "#d97706", "#fbbf24", "#78350f"),
        colors={
            "--accent": "#f59e0b",
            "--accent-hover": "#d97706",
            "--accent-light": "#fbbf24",
            "--accent-glow": "rgba(245, 158, 11, 0.25)",
            "--gradient-start": "#f59e0b",
            "--gradient-end": "#ef4444",
            "--link": "#fbbf24",
        },
    ),
    _theme(
        "rose-garden",
        name="Rose Garden",
        emoji="🌹",
        description="Soft pinks with a bold accent.",
        preview=("#f43f5e", "#e11d48", "#fb7185", "#881337"),
        colors={
            "--accent": "#f43f5e",
            "--accent-hover": "#e11d48",
            "--accent-light": "#fb7185",
            "--accent-glow": "rgba(244, 63, 94, 0.25)",
            "--gradient-start": "#f43f5e",
            "--gradient-end": "#f97316",
            "--link": "#fb7185",
        },
    ),
    _theme(
        "arctic-frost",
        name="Arctic Frost",
        emoji="❄️",
        description="Crisp cyans, cool and minimal.",
        preview=("#06b6d4", "#0891b2", "#22d3ee", "#164e63"),
        colors={
            "--accent": "#06b6d4",
            "--accent-hover": "#0891b2",
            "--accent-light": "#22d3ee",
            "--accent-glow": "rgba(6, 182, 212, 0.25)",
            "--gradient-start": "#06b6d4",
            "--gradient-end": "#3b82f6",
            "--link": "#22d3ee",
        },
    ),
)


def _validate_palettes(themes: tuple[Theme, ...]) -> frozenset[str]:
    expected = frozenset(themes[0].colors)
    for theme in themes:
        variables = frozenset(theme.colors)
        if variables != expected:
            missing = sorted(expected - variables)
            extra = sorted(variables - expected)
            raise ThemeRegistryError(
                f"Theme {theme.id!r} variable set differs: missing={missing} extra={extra}"
            )
    return expected


THEME_VARIABLES: Final[frozenset[str]] = _validate_palettes(_THEME_LIST)
THEMES: Final[Mapping[str, Theme]] = MappingProxyType(
    {theme.id: theme for theme in _THEME_LIST}
)
DEFAULT_THEME: Final[str] = "emerald-forest"


def get_theme(theme_id: str | None) -> Theme | None:
    if theme_id is None:
        return None
    return THEMES.get(theme_id)


def resolve_theme(candidate: str | None) -> str:
    if candidate and candidate in THEMES:
        return candidate
    return DEFAULT_THEME


def resolve_mode(candidate: str | None) -> Mode:
    return parse_mode(candidate) or DEFAULT_MODE
