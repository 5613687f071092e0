"""Interactive grid prompt session.

This module provides TablePrompt, which wires decoded key events to the
cursor and grid, redraws after every change, and hands the composed
answer to the caller's validator on Enter.

Example:
    from rich_grid import TablePrompt

    prompt = TablePrompt(
        "Pick a variant",
        rows=[
            {"name": "Color", "choices": [("Red", 1), ("Blue", 2)]},
            {"name": "Size", "choices": ["s", "m"], "default": "m"},
        ],
    )
    answer = prompt.show()  # {"Color": 1, "Size": "m"}
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from typing import Any, Callable

import readchar

from .components import Row
from .config import GridConfig, load_config
from .cursor import CursorController, CursorState
from .grid import GridState
from .keys import DOWN, LEFT, RIGHT, SELECT, UP, Abort, Event, KeyPress, LineSubmit, decode_key
from .render import Frame, render_frame
from .screen import LiveScreen, ScreenWriter, hidden_cursor
from .styles import RichStyler, Styler
from .themes import Theme, get_theme
from .types import SessionStatus
from .validation import Filter, Validator, run_validation

logger = logging.getLogger(__name__)


class TablePrompt:
    """Grid prompt: one choice per row, picked with the arrow keys.

    Keyboard controls:
        - Up/Down or k/j: Move between rows (stops at the first/last row)
        - Left/Right or h/l: Cycle options in the current row (wraps)
        - Space: Select the option under the cursor
        - Enter: Submit the answer
        - Esc/q/Ctrl+C: Abort without answering

    The answer is a dict mapping each row name to its selected value, with
    UNSET for rows nothing was chosen for.

    Args:
        question: Prompt text shown above the grid.
        rows: Row objects or ``{"name", "choices", "default"}`` mappings.
        validate: Called with the (filtered) answer on Enter. Return True to
            accept, or False / an error message to reject.
        filter: Transforms the answer before validation.
        screen: Output writer (a LiveScreen on stdout if None).
        read_key: Blocking key source (readchar.readkey if None).
        styler: Styling capability (Rich markup if None).
        theme: Colors and icons (RICH_GRID_THEME or default if None).
        config: Layout settings (environment/defaults if None).
        page_size: Shortcut overriding ``config.page_size``.

    Raises:
        GridConfigError: If rows or layout settings are malformed.
    """

    def __init__(
        self,
        question: str,
        rows: Iterable[Row | dict],
        *,
        validate: Validator | None = None,
        filter: Filter | None = None,
        screen: ScreenWriter | None = None,
        read_key: Callable[[], str] | None = None,
        styler: Styler | None = None,
        theme: Theme | None = None,
        config: GridConfig | None = None,
        page_size: int | None = None,
    ):
        if config is None:
            config = load_config(page_size=page_size)
        elif page_size is not None:
            config = dataclasses.replace(config, page_size=page_size)

        self.question = question
        self.grid = GridState(rows)
        self.cursor = CursorState()
        self.controller = CursorController(self.grid, self.cursor)
        self.config = config
        self.theme = theme or get_theme()
        self.styler = styler or RichStyler(self.theme)
        self.screen = screen or LiveScreen(markup=getattr(self.styler, "markup", True))
        self.read_key = read_key or readchar.readkey
        self.validate = validate
        self.filter = filter

        self.status = SessionStatus.ACTIVE
        self.has_committed = False
        self.answer: Any = None

        self._key_actions: dict[str, Callable[[], Any]] = {
            UP: self.controller.row_prev,
            DOWN: self.controller.row_next,
            LEFT: self.controller.column_prev,
            RIGHT: self.controller.column_next,
            SELECT: self.commit,
        }

    def frame(self, error: str | None = None) -> Frame:
        """Compute the current frame without drawing it."""
        return render_frame(
            self.question,
            self.grid,
            self.cursor,
            self.status,
            has_committed=self.has_committed,
            error=error,
            styler=self.styler,
            config=self.config,
            theme=self.theme,
        )

    def render(self, error: str | None = None) -> None:
        frame = self.frame(error)
        self.screen.render(frame.message, frame.bottom)

    def commit(self) -> None:
        """Select the option under the cursor for the active row."""
        option = self.grid.commit(self.cursor)
        if option is None:
            return
        self.has_committed = True
        logger.debug("Row %d set to %r", self.cursor.row, option.value)

    def submit(self) -> None:
        """Validate the composed answer and finish the session if accepted."""
        answer = self.grid.answer()
        result = run_validation(answer, self.validate, self.filter)

        if not result.is_valid:
            logger.debug("Answer rejected: %s", result.error)
            self.render(result.error)
            return

        logger.debug("Answer accepted")
        self.status = SessionStatus.ANSWERED
        self.has_committed = True
        self.answer = result.value
        self.render()

    def abort(self) -> None:
        """End the session without an answer."""
        logger.debug("Prompt aborted")
        self.status = SessionStatus.ABORTED
        self.answer = None
        self.render()

    def dispatch(self, event: Event) -> None:
        """Apply one event to the session and redraw.

        Events arriving after the session ended are ignored.
        """
        if self.status.is_terminal:
            logger.debug("Ignoring %r, session is %s", event, self.status)
            return

        if isinstance(event, LineSubmit):
            self.submit()
        elif isinstance(event, Abort):
            self.abort()
        elif isinstance(event, KeyPress):
            action = self._key_actions.get(event.name)
            if action is None:
                return
            action()
            self.render()

    def run(self, events: Iterable[Event]) -> Any:
        """Dispatch events one at a time until the session ends.

        Returns:
            The accepted answer, or None if aborted or the events ran out.
        """
        for event in events:
            self.dispatch(event)
            if self.status.is_terminal:
                break
        return self.answer

    def _key_events(self) -> Iterator[Event]:
        while True:
            event = decode_key(self.read_key())
            if event is not None:
                yield event

    def show(self) -> Any:
        """Display the prompt and block until it is answered or aborted.

        The terminal cursor stays hidden while the prompt is open and is
        restored however the session ends.

        Returns:
            The answer dict, or None if the user aborted.
        """
        with hidden_cursor(self.screen):
            try:
                self.render()
                try:
                    self.run(self._key_events())
                except KeyboardInterrupt:
                    self.abort()
            finally:
                self.screen.done()

        return self.answer


def prompt_table(question: str, rows: Iterable[Row | dict], **kwargs: Any) -> Any:
    """Show a TablePrompt and return its answer (None if aborted)."""
    return TablePrompt(question, rows, **kwargs).show()
