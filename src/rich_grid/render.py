"""Render grid prompt state into a text frame.

Everything here is a pure function of its arguments: the renderer reads
the grid and cursor but never changes them. Styling is delegated to an
injected Styler so the same code produces Rich markup or plain text.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_LABEL_WIDTH, GridConfig
from .cursor import CursorState
from .grid import GridState
from .styles import RichStyler, Styler
from .themes import DEFAULT_THEME, Theme
from .types import SessionStatus


@dataclass(frozen=True)
class Frame:
    """One redraw: the main message and the line shown below it."""

    message: str
    bottom: str = ""


def clamp_label(label: str, width: int = DEFAULT_LABEL_WIDTH, ellipsis: str = "...") -> str:
    """Truncate a row label to ``width`` and pad it so options line up.

    Labels longer than ``width`` (ignoring surrounding whitespace) are cut
    and suffixed with ``ellipsis``. The result is padded to ``width + 4``.
    """
    if len(label.strip()) > width:
        label = label[: width - len(ellipsis)] + ellipsis
    return label.ljust(width + 4)


def visible_window(active_row: int, page_size: int, total: int) -> tuple[int, int]:
    """Inclusive (first, last) row indexes to draw, centered on ``active_row``.

    The window keeps a constant height of ``page_size`` and shifts instead
    of running past either end. Grids that fit entirely are returned whole;
    an empty grid yields (0, -1).
    """
    if total <= 0:
        return 0, -1
    if total <= page_size:
        return 0, total - 1

    first = active_row - page_size // 2
    first = max(0, min(first, total - page_size))
    return first, first + page_size - 1


def help_hint(styler: Styler) -> str:
    """Key usage hint shown until the first option is committed."""
    return styler.dim(
        f"(Use {styler.key('<up/down>')} to move rows, "
        f"{styler.key('<left/right>')} to move between options, "
        f"{styler.key('<space>')} to select, and "
        f"{styler.key('<enter>')} to finish)"
    )


def render_row(
    grid: GridState,
    cursor: CursorState,
    row_index: int,
    status: SessionStatus,
    styler: Styler,
    config: GridConfig,
    theme: Theme = DEFAULT_THEME,
) -> str:
    """Render one row: padded label followed by its options."""
    row = grid.rows[row_index]
    show_cursor = status is SessionStatus.ACTIVE and cursor.row == row_index

    options = []
    for column, option in enumerate(row.choices):
        text = styler.text(option.display)
        if grid.is_selected(row_index, option):
            text = styler.highlight(text)
        if show_cursor and cursor.column == column:
            text = styler.inverse(text)
        options.append(text)

    label = styler.text(clamp_label(row.name, config.label_width, theme.ellipsis))
    line = label + styler.text(config.separator).join(options)
    if not grid.is_answered(row_index):
        line = styler.dim(line)
    return line


def render_table(
    grid: GridState,
    cursor: CursorState,
    status: SessionStatus,
    styler: Styler,
    config: GridConfig,
    theme: Theme = DEFAULT_THEME,
) -> str:
    """Render the visible slice of rows, with scroll indicators when paged."""
    first, last = visible_window(cursor.row, config.page_size, grid.row_count)

    lines = []
    if first > 0:
        lines.append(styler.dim(f"  {theme.scroll_up_icon} {first} more above"))

    for row_index in range(first, last + 1):
        lines.append(render_row(grid, cursor, row_index, status, styler, config, theme))

    below = grid.row_count - (last + 1)
    if below > 0:
        lines.append(styler.dim(f"  {theme.scroll_down_icon} {below} more below"))

    return "\n".join(lines)


def render_frame(
    question: str,
    grid: GridState,
    cursor: CursorState,
    status: SessionStatus,
    *,
    has_committed: bool = False,
    error: str | None = None,
    styler: Styler | None = None,
    config: GridConfig | None = None,
    theme: Theme | None = None,
) -> Frame:
    """Project the prompt state into a Frame.

    Args:
        question: Prompt text shown on the first line.
        grid: Rows and selected values.
        cursor: Active coordinate; only highlighted while ACTIVE.
        status: Session status.
        has_committed: Whether any option was committed yet (hides the hint).
        error: Validation message for the bottom line, replacing the hint.
        styler: Styling capability (defaults to Rich markup).
        config: Layout settings.
        theme: Icons and colors.

    Returns:
        Frame with the question and table as ``message`` and the hint or
        error as ``bottom``.
    """
    theme = theme or DEFAULT_THEME
    styler = styler or RichStyler(theme)
    config = config or GridConfig()

    question_line = f"{styler.prefix(theme.prefix_icon)} {styler.bold(styler.text(question))}"
    message = f"{question_line}\n\n{render_table(grid, cursor, status, styler, config, theme)}"

    bottom = ""
    if not has_committed and status is SessionStatus.ACTIVE:
        bottom = help_hint(styler)
    if error:
        bottom = f"{styler.error(theme.error_icon)} {styler.text(error)}"

    return Frame(message=message, bottom=bottom)
