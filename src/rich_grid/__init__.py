"""Rich.Live-based grid prompt.

Pick one option per row of a grid with the arrow keys.

Example:
    from rich_grid import Row, prompt_table

    answer = prompt_table(
        "Configure the build",
        rows=[
            Row("Color", choices=[("Red", 1), ("Blue", 2)]),
            Row("Size", choices=["s", "m"], default="m"),
        ],
    )
    # {"Color": 1, "Size": "m"}
"""

from .components import UNSET, Option, Row
from .config import GridConfig, load_config
from .cursor import CursorController, CursorState
from .errors import GridConfigError, GridError
from .grid import GridState
from .keys import Abort, KeyPress, LineSubmit, decode_key
from .prompt import TablePrompt, prompt_table
from .render import Frame, clamp_label, render_frame, visible_window
from .screen import LiveScreen, ScreenWriter, hidden_cursor
from .styles import PlainStyler, RichStyler, Styler
from .themes import DEFAULT_THEME, Theme, get_theme
from .types import SessionStatus
from .validation import ValidationResult, run_validation

__version__ = "0.1.0"

__all__ = [
    # Main entry points
    "TablePrompt",
    "prompt_table",
    # Model
    "Row",
    "Option",
    "UNSET",
    "GridState",
    "CursorState",
    "CursorController",
    "SessionStatus",
    # Events
    "KeyPress",
    "LineSubmit",
    "Abort",
    "decode_key",
    # Rendering
    "Frame",
    "render_frame",
    "visible_window",
    "clamp_label",
    "Styler",
    "RichStyler",
    "PlainStyler",
    "ScreenWriter",
    "LiveScreen",
    "hidden_cursor",
    # Theming and config
    "Theme",
    "DEFAULT_THEME",
    "get_theme",
    "GridConfig",
    "load_config",
    # Validation and errors
    "ValidationResult",
    "run_validation",
    "GridError",
    "GridConfigError",
]
