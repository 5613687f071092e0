"""Screen writers for grid prompts.

A screen writer receives every rendered frame as a ``(message, bottom)``
pair and controls terminal cursor visibility. LiveScreen draws into a
Rich Live region so each redraw replaces the previous one without flicker.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from rich.console import Console
from rich.live import Live
from rich.text import Text


class ScreenWriter(Protocol):
    """Output side of a prompt session."""

    def render(self, message: str, bottom: str = "") -> None:
        ...

    def hide_cursor(self) -> None:
        ...

    def show_cursor(self) -> None:
        ...

    def done(self) -> None:
        """Release the drawing area; the last frame stays on screen."""
        ...


@contextmanager
def hidden_cursor(screen: ScreenWriter) -> Iterator[ScreenWriter]:
    """Hide the terminal cursor for the duration of the block.

    The cursor is shown again on every exit path, including exceptions
    raised while rendering.
    """
    screen.hide_cursor()
    try:
        yield screen
    finally:
        screen.show_cursor()


class LiveScreen:
    """ScreenWriter backed by rich.live.Live.

    Refreshes happen synchronously on each render call; no background
    refresh thread is started.

    Args:
        console: Rich Console to draw on (created if None).
        markup: Whether frames contain Rich markup (False for plain text).
    """

    def __init__(self, console: Console | None = None, markup: bool = True):
        self.console = console or Console(highlight=False)
        self.markup = markup
        self._live: Live | None = None

    def _to_text(self, message: str, bottom: str) -> Text:
        content = f"{message}\n{bottom}" if bottom else message
        if self.markup:
            return Text.from_markup(content)
        return Text(content)

    def start(self) -> None:
        if self._live is None:
            self._live = Live("", console=self.console, auto_refresh=False)
            self._live.start()

    def render(self, message: str, bottom: str = "") -> None:
        if self._live is None:
            self.start()
        self._live.update(self._to_text(message, bottom), refresh=True)

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def done(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def __enter__(self) -> LiveScreen:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.done()
