"""Styling capability injected into the renderer.

The renderer only ever asks for a handful of semantic styles. RichStyler
turns them into Rich markup using a Theme; PlainStyler leaves text
untouched, which keeps frames easy to assert on in tests.
"""

from __future__ import annotations

from typing import Protocol

from rich.markup import escape

from .themes import DEFAULT_THEME, Theme


class Styler(Protocol):
    """Semantic styling contract used by the renderer."""

    def text(self, value: str) -> str:
        """Prepare literal user text (labels, option names, messages)."""
        ...

    def highlight(self, value: str) -> str:
        """Mark the committed option of a row."""
        ...

    def inverse(self, value: str) -> str:
        """Mark the option under the cursor."""
        ...

    def dim(self, value: str) -> str:
        """De-emphasize unanswered rows and hints."""
        ...

    def bold(self, value: str) -> str:
        ...

    def key(self, value: str) -> str:
        """Style a key name inside the help hint."""
        ...

    def prefix(self, value: str) -> str:
        """Style the question prefix icon."""
        ...

    def error(self, value: str) -> str:
        """Style the error marker."""
        ...


def _wrap(style: str, value: str) -> str:
    return f"[{style}]{value}[/{style}]"


class RichStyler:
    """Styler producing Rich markup from a Theme."""

    markup = True

    def __init__(self, theme: Theme | None = None):
        self.theme = theme or DEFAULT_THEME

    def text(self, value: str) -> str:
        return escape(value)

    def highlight(self, value: str) -> str:
        return _wrap(self.theme.selected_color, value)

    def inverse(self, value: str) -> str:
        return _wrap("reverse", value)

    def dim(self, value: str) -> str:
        return _wrap(self.theme.dim_color, value)

    def bold(self, value: str) -> str:
        return _wrap("bold", value)

    def key(self, value: str) -> str:
        return _wrap(self.theme.key_color, value)

    def prefix(self, value: str) -> str:
        return _wrap(self.theme.prefix_color, value)

    def error(self, value: str) -> str:
        return _wrap(self.theme.error_color, value)


class PlainStyler:
    """No-op styler: every style returns its input unchanged."""

    markup = False

    def text(self, value: str) -> str:
        return value

    def highlight(self, value: str) -> str:
        return value

    def inverse(self, value: str) -> str:
        return value

    def dim(self, value: str) -> str:
        return value

    def bold(self, value: str) -> str:
        return value

    def key(self, value: str) -> str:
        return value

    def prefix(self, value: str) -> str:
        return value

    def error(self, value: str) -> str:
        return value
