from __future__ import annotations

from dataclasses import dataclass

from roadmap_hub.theme import THEMES, Mode
from roadmap_hub.theme_store import ActiveSelection


@dataclass(frozen=True)
class ThemeOptionViewModel:
    id: str
    name: str
    emoji: str
    description: str
    preview: tuple[str, ...]
    is_active: bool


@dataclass(frozen=True)
class ThemeControlsViewModel:
    active_theme_id: str
    active_emoji: str
    mode: str
    mode_icon: str
    toggle_label: str
    options: list[ThemeOptionViewModel]


def build_theme_controls(selection: ActiveSelection) -> ThemeControlsViewModel:
    next_mode = selection.mode.toggled()
    return ThemeControlsViewModel(
        active_theme_id=selection.theme_id,
        active_emoji=THEMES[selection.theme_id].emoji or "🎨",
        mode=selection.mode.value,
        mode_icon="🌙" if selection.mode is Mode.DARK else "☀️",
        toggle_label=f"Switch to {next_mode.value} mode",
        options=[
            ThemeOptionViewModel(
                id=theme.id,
                name=theme.name,
                emoji=theme.emoji,
                description=theme.description,
                preview=theme.preview,
                is_active=theme.id == selection.theme_id,
            )
            for theme in THEMES.values()
        ],
    )
