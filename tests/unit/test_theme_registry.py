from __future__ import annotations

import pytest

from roadmap_hub.theme import (
    DEFAULT_THEME,
    THEME_VARIABLES,
    THEMES,
    Mode,
    Theme,
    ThemeRegistryError,
    _validate_palettes,
    get_theme,
    parse_mode,
    resolve_mode,
    resolve_theme,
)


def test_default_theme_is_registered() -> None:
    assert DEFAULT_THEME in THEMES
    assert "slate-ocean" in THEMES


def test_every_theme_defines_the_shared_variable_set() -> None:
    for theme in THEMES.values():
        assert frozenset(theme.colors) == THEME_VARIABLES, theme.id
        assert theme.preview
        assert theme.name


def test_registry_and_palettes_are_read_only() -> None:
    with pytest.raises(TypeError):
        THEMES["new"] = THEMES[DEFAULT_THEME]  # type: ignore[index]
    with pytest.raises(TypeError):
        THEMES[DEFAULT_THEME].colors["--accent"] = "#000000"  # type: ignore[index]


def test_validate_palettes_rejects_incomplete_theme() -> None:
    complete = THEMES[DEFAULT_THEME]
    incomplete = Theme(
        id="partial",
        name="Partial",
        emoji="🧩",
        description="",
        preview=(),
        colors={"--accent": "#ffffff"},
    )

    with pytest.raises(ThemeRegistryError, match="partial"):
        _validate_palettes((complete, incomplete))


def test_get_theme_distinguishes_not_found() -> None:
    assert get_theme("slate-ocean") is THEMES["slate-ocean"]
    assert get_theme("no-such-theme") is None
    assert get_theme(None) is None


def test_resolve_theme_falls_back_to_default() -> None:
    assert resolve_theme("arctic-frost") == "arctic-frost"
    assert resolve_theme("not-a-theme") == DEFAULT_THEME
    assert resolve_theme(None) == DEFAULT_THEME


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("dark", Mode.DARK), ("light", Mode.LIGHT), ("Dark", None), ("", None), (None, None)],
)
def test_parse_mode_accepts_exact_literals_only(raw, expected) -> None:
    assert parse_mode(raw) is expected


def test_mode_toggle_and_resolve() -> None:
    assert Mode.DARK.toggled() is Mode.LIGHT
    assert Mode.LIGHT.toggled() is Mode.DARK
    assert resolve_mode("LIGHT") is Mode.DARK
