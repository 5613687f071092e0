"""Row and option building blocks for grid prompts.

This module provides the values a grid is built from:
- Option: One selectable choice (display text + opaque value)
- Row: One field of the grid, owning an ordered list of options
- UNSET: Sentinel for "nothing chosen yet"
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import GridConfigError


class _Unset:
    """Marker type for rows that have no selected value yet.

    Never equal to any option value, including falsy ones like None or 0.
    """

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict) -> _Unset:
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class Option:
    """One choice within a row.

    Attributes:
        display: Text shown in the grid.
        value: Value stored when this option is committed. Highlight and
            selection compare by value, never by display text.
    """

    display: str
    value: Any = None

    @classmethod
    def coerce(cls, raw: Any) -> Option:
        """Build an Option from the shapes accepted in row configuration.

        Accepts an Option, a bare string or number (display is its text,
        value is the original), a ``(display, value)`` tuple, or a mapping
        with ``name``/``display`` and/or ``value`` keys.
        """
        if isinstance(raw, Option):
            return raw
        if isinstance(raw, str):
            return cls(display=raw, value=raw)
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cls(display=str(raw), value=raw)
        if isinstance(raw, tuple) and len(raw) == 2:
            return cls(display=str(raw[0]), value=raw[1])
        if isinstance(raw, Mapping):
            display = raw.get("display", raw.get("name"))
            if display is None:
                if "value" not in raw:
                    raise GridConfigError(
                        f"Option mapping needs a 'name', 'display' or 'value': {raw!r}"
                    )
                display = str(raw["value"])
            value = raw["value"] if "value" in raw else display
            return cls(display=str(display), value=value)
        raise GridConfigError(f"Unsupported option: {raw!r}")


@dataclass(frozen=True)
class Row:
    """One selectable field of the grid.

    Attributes:
        name: Label shown at the start of the line and key in the answer.
        choices: Ordered options; may be empty.
        default: Initially selected value, or UNSET.
    """

    name: str
    choices: tuple[Option, ...] = field(default_factory=tuple)
    default: Any = UNSET

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise GridConfigError(f"Row name must be a string, got {self.name!r}")
        # Normalise whatever sequence was passed into a tuple of Options
        object.__setattr__(self, "choices", tuple(Option.coerce(c) for c in self.choices))

    @property
    def choice_count(self) -> int:
        return len(self.choices)

    @classmethod
    def coerce(cls, raw: Any) -> Row:
        """Build a Row from a Row or a ``{"name", "choices", "default"}`` mapping."""
        if isinstance(raw, Row):
            return raw
        if isinstance(raw, Mapping):
            if "name" not in raw:
                raise GridConfigError(f"Row mapping needs a 'name': {raw!r}")
            choices = raw.get("choices") or ()
            if isinstance(choices, str) or not isinstance(choices, Sequence):
                raise GridConfigError(f"Row choices must be a sequence: {raw!r}")
            return cls(
                name=raw["name"],
                choices=tuple(choices),
                default=raw.get("default", UNSET),
            )
        raise GridConfigError(f"Unsupported row: {raw!r}")
