"""Presentation theme presets.

Themes are frozen dataclasses that group all styling tokens together. The
terminal renderer reads the colour *names* (one of the eight basic terminal
colours); the image renderer reads the hex values. Adversary colours come
from the game config palette and are resolved through ``named_colors``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

TERMINAL_COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)


@dataclass(frozen=True)
class Theme:
    """Complete collection of presentation style tokens."""

    # Terminal colour names
    player_color: str = "yellow"
    wall_color: str = "white"
    collectible_color: str = "white"
    status_color: str = "cyan"
    win_color: str = "green"
    loss_color: str = "red"

    # Image renderer
    named_colors: dict[str, str] = field(default_factory=dict)
    wall_fill: str = "#808080"
    floor_fill: str = "#101010"
    collectible_fill: str = "#F5F5F5"
    player_fill: str = "#FFD700"
    grid_line_color: str = "#333333"

    def hex_for(self, color_name: str) -> str:
        """Hex colour for a palette name; unknown names fall back to the player fill."""
        return self.named_colors.get(color_name, self.player_fill)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

_DEFAULT_NAMED_COLORS: dict[str, str] = {
    "red": "#E53935",
    "green": "#43A047",
    "blue": "#1E88E5",
    "magenta": "#D81B60",
    "cyan": "#00ACC1",
    "yellow": "#FFD700",
    "white": "#F5F5F5",
}

DEFAULT_THEME = Theme(named_colors=_DEFAULT_NAMED_COLORS)

HIGH_CONTRAST_THEME = Theme(
    player_color="yellow",
    wall_color="blue",
    collectible_color="white",
    status_color="white",
    named_colors={
        "red": "#FF0000",
        "green": "#00FF00",
        "blue": "#0000FF",
        "magenta": "#FF00FF",
        "cyan": "#00FFFF",
        "yellow": "#FFFF00",
        "white": "#FFFFFF",
    },
    wall_fill="#0000AA",
    floor_fill="#000000",
    collectible_fill="#FFFFFF",
    player_fill="#FFFF00",
    grid_line_color="#444444",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "high-contrast": HIGH_CONTRAST_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
