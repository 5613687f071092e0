"""Configurable themes for grid prompts.

The Theme dataclass holds the visual tokens used by the Rich styler
(colors, icons). Named palettes can be selected with the
RICH_GRID_THEME environment variable.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    """Visual theme for grid prompts.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        name: Palette name.
        prefix_color: Color of the question prefix icon.
        selected_color: Color for the committed option of a row.
        key_color: Color for key names in the help hint.
        dim_color: Style for unanswered rows, hints and scroll indicators.
        error_color: Color for the error marker.

        prefix_icon: Character shown before the question.
        error_icon: Marker in front of validation errors.
        ellipsis: Suffix for truncated row labels.
        scroll_up_icon: Character indicating more rows above.
        scroll_down_icon: Character indicating more rows below.
    """

    name: str = "default"

    # Colors
    prefix_color: str = "green"
    selected_color: str = "cyan"
    key_color: str = "bold cyan"
    dim_color: str = "dim"
    error_color: str = "red"

    # Icons
    prefix_icon: str = "?"
    error_icon: str = ">>"
    ellipsis: str = "..."
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"


# Default theme used when none is specified
DEFAULT_THEME = Theme()

_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "contrast": Theme(
        name="contrast",
        prefix_color="bold yellow",
        selected_color="bold bright_cyan",
        key_color="bold yellow",
        dim_color="grey50",
        error_color="bold bright_red",
    ),
    "mono": Theme(
        name="mono",
        prefix_color="bold",
        selected_color="bold underline",
        key_color="bold",
        dim_color="dim",
        error_color="bold",
    ),
}


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def available_themes() -> list[str]:
    """Names accepted by get_theme()."""
    return sorted(_THEMES)


def get_theme(name: str | None = None) -> Theme:
    """Return a named palette, honoring the RICH_GRID_THEME override.

    Unknown names fall back to the default palette.
    """
    env_theme = os.environ.get("RICH_GRID_THEME")
    if env_theme:
        name = env_theme

    if not name:
        return DEFAULT_THEME

    key = _normalize_theme_key(name)
    if key not in _THEMES:
        logger.warning("Unknown theme %r, using default", name)
        return DEFAULT_THEME
    return _THEMES[key]
