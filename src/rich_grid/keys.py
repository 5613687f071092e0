"""Keyboard input helpers for rich_grid.

Raw keys from ``readchar.readkey()`` are decoded into the small event
vocabulary the prompt understands:

- KeyPress("up" | "down"): move between rows (also k/j)
- KeyPress("left" | "right"): cycle options in the active row (also h/l)
- KeyPress("select"): commit the option under the cursor (space)
- LineSubmit: finish and submit the answer (enter)
- Abort: tear down the session (esc, q, ctrl+c)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import readchar

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
SELECT = "select"


@dataclass(frozen=True)
class KeyPress:
    """A navigation or select gesture."""

    name: str


@dataclass(frozen=True)
class LineSubmit:
    """Enter pressed; ``line`` is whatever text the input runtime buffered."""

    line: str = ""


@dataclass(frozen=True)
class Abort:
    """User asked to leave without answering."""


Event = Union[KeyPress, LineSubmit, Abort]


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_exit(key: str) -> bool:
    """Check if key is a quit key (q or Ctrl+C)."""
    return key.lower() == "q" or key in (readchar.key.CTRL_C, "\x03")


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key.lower() == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key.lower() == "j" or key == readchar.key.DOWN


def is_left(key: str) -> bool:
    """Check if key is left arrow or vim 'h'."""
    return key.lower() == "h" or key == readchar.key.LEFT


def is_right(key: str) -> bool:
    """Check if key is right arrow or vim 'l'."""
    return key.lower() == "l" or key == readchar.key.RIGHT


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def decode_key(key: str) -> Event | None:
    """Translate a raw key into a prompt event.

    Returns:
        The matching event, or None for keys the prompt ignores.
    """
    if is_enter(key):
        return LineSubmit()
    if is_escape(key) or is_exit(key):
        return Abort()
    if is_space(key):
        return KeyPress(SELECT)
    if is_up(key):
        return KeyPress(UP)
    if is_down(key):
        return KeyPress(DOWN)
    if is_left(key):
        return KeyPress(LEFT)
    if is_right(key):
        return KeyPress(RIGHT)
    return None
