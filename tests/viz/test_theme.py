"""Tests for maze_chase.viz.theme."""

from __future__ import annotations

import pytest

from maze_chase.config.constants import ADVERSARY_COLORS
from maze_chase.viz.theme import (
    DEFAULT_THEME,
    HIGH_CONTRAST_THEME,
    REGISTERED_THEMES,
    TERMINAL_COLOR_NAMES,
    get_theme,
)


def test_get_theme_is_case_insensitive() -> None:
    assert get_theme("Default") is DEFAULT_THEME
    assert get_theme("HIGH-CONTRAST") is HIGH_CONTRAST_THEME


def test_unknown_theme_lists_available() -> None:
    with pytest.raises(ValueError, match="available: default, high-contrast"):
        get_theme("neon")


@pytest.mark.parametrize("name", sorted(REGISTERED_THEMES))
def test_theme_covers_palette(name: str) -> None:
    theme = REGISTERED_THEMES[name]
    for color in ADVERSARY_COLORS:
        assert color in theme.named_colors
        assert theme.hex_for(color).startswith("#")
    for token in (theme.player_color, theme.wall_color, theme.collectible_color, theme.status_color):
        assert token in TERMINAL_COLOR_NAMES


def test_hex_for_unknown_name_falls_back() -> None:
    assert DEFAULT_THEME.hex_for("chartreuse") == DEFAULT_THEME.player_fill
