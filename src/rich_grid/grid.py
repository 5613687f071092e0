"""Grid model: rows plus the selected value of each row."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from .components import UNSET, Option, Row
from .errors import GridConfigError

if TYPE_CHECKING:
    from .cursor import CursorState


class GridState:
    """Rows of a grid prompt and the value currently chosen for each.

    The row configuration is a read-only snapshot taken at construction.
    ``selected_values`` is kept parallel to ``rows``; an entry is ``UNSET``
    until the row gets a default or a committed option.

    Raises:
        GridConfigError: If a row is malformed or two rows share a name.
    """

    def __init__(self, rows: Iterable[Row | dict]):
        self.rows: tuple[Row, ...] = tuple(Row.coerce(row) for row in rows)

        seen: set[str] = set()
        for row in self.rows:
            if row.name in seen:
                raise GridConfigError(f"Duplicate row name: {row.name}")
            seen.add(row.name)

        self.selected_values: list[Any] = [row.default for row in self.rows]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def choices(self, row: int) -> tuple[Option, ...]:
        return self.rows[row].choices

    def choice_count(self, row: int) -> int:
        return len(self.rows[row].choices)

    def selected(self, row: int) -> Any:
        return self.selected_values[row]

    def select(self, row: int, value: Any) -> None:
        """Overwrite the selected value for one row."""
        self.selected_values[row] = value

    def is_answered(self, row: int) -> bool:
        return self.selected_values[row] is not UNSET

    def is_selected(self, row: int, option: Option) -> bool:
        """Whether ``option`` matches the row's selected value (by value)."""
        selected = self.selected_values[row]
        if selected is UNSET:
            return False
        return option.value == selected

    def commit(self, cursor: CursorState) -> Option | None:
        """Store the option under the cursor as its row's value.

        Returns the committed option, or None when the grid or the active
        row has no options.
        """
        if not self.rows or not self.rows[cursor.row].choices:
            return None
        option = self.rows[cursor.row].choices[cursor.column]
        self.selected_values[cursor.row] = option.value
        return option

    def values(self) -> list[Any]:
        """Selected values in row order."""
        return list(self.selected_values)

    def answer(self) -> dict[str, Any]:
        """Selected values keyed by row name (UNSET for untouched rows)."""
        return {row.name: value for row, value in zip(self.rows, self.selected_values)}
