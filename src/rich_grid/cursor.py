"""Cursor movement over a grid.

Rows are bounded: moving past the first or last row does nothing.
Columns wrap: moving past either end of a row jumps to the other end.
"""

from __future__ import annotations

from dataclasses import dataclass

from .grid import GridState


@dataclass
class CursorState:
    """Active (row, column) coordinate within the grid."""

    row: int = 0
    column: int = 0


class CursorController:
    """Applies row/column moves to a CursorState for a given grid."""

    def __init__(self, grid: GridState, cursor: CursorState | None = None):
        self.grid = grid
        self.cursor = cursor or CursorState()

    def _clamp_column(self) -> None:
        """Pull the column back inside the active row after a row change."""
        count = self.grid.choice_count(self.cursor.row)
        if self.cursor.column >= count:
            self.cursor.column = max(count - 1, 0)

    def move_row(self, delta: int) -> bool:
        """Move to the previous (-1) or next (+1) row.

        Returns:
            True if the cursor moved.
        """
        if self.grid.row_count == 0:
            return False

        new_row = self.cursor.row + delta
        if new_row < 0 or new_row >= self.grid.row_count:
            return False

        self.cursor.row = new_row
        self._clamp_column()
        return True

    def move_column(self, delta: int) -> bool:
        """Cycle to the previous (-1) or next (+1) option of the active row.

        Returns:
            True if the cursor moved.
        """
        if self.grid.row_count == 0:
            return False

        count = self.grid.choice_count(self.cursor.row)
        if count == 0:
            return False

        self.cursor.column = (self.cursor.column + delta) % count
        return True

    def row_prev(self) -> bool:
        return self.move_row(-1)

    def row_next(self) -> bool:
        return self.move_row(+1)

    def column_prev(self) -> bool:
        return self.move_column(-1)

    def column_next(self) -> bool:
        return self.move_column(+1)
