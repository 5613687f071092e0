"""Type definitions shared across rich_grid."""

from __future__ import annotations

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle of a grid prompt session.

    ACTIVE is the only status that accepts gestures; ANSWERED and ABORTED
    are terminal.
    """

    ACTIVE = "active"
    ANSWERED = "answered"
    ABORTED = "aborted"

    def __str__(self) -> str:
        return self.value

    @property
    def is_terminal(self) -> bool:
        return self is not SessionStatus.ACTIVE
