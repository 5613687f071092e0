"""Layout settings for grid prompts.

Defaults can be overridden per prompt or through the environment:
RICH_GRID_PAGE_SIZE and RICH_GRID_LABEL_WIDTH.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import GridConfigError

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
DEFAULT_LABEL_WIDTH = 25
DEFAULT_SEPARATOR = " | "
MIN_LABEL_WIDTH = 4


@dataclass(frozen=True)
class GridConfig:
    """Layout of a rendered grid.

    Attributes:
        page_size: Rows drawn at once; longer grids scroll around the cursor.
        label_width: Row labels longer than this are truncated with an ellipsis.
        separator: Text placed between the options of a row.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    label_width: int = DEFAULT_LABEL_WIDTH
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self):
        if self.page_size < 1:
            raise GridConfigError(f"page_size must be at least 1, got {self.page_size}")
        if self.label_width < MIN_LABEL_WIDTH:
            raise GridConfigError(
                f"label_width must be at least {MIN_LABEL_WIDTH}, got {self.label_width}"
            )


def _env_int(name: str, default: int, minimum: int) -> int:
    """Read a positive integer override, falling back to ``default``."""
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%d: must be at least %d", name, value, minimum)
        return default
    return value


def load_config(
    page_size: int | None = None,
    label_width: int | None = None,
    separator: str | None = None,
) -> GridConfig:
    """Build a GridConfig from explicit values, then env, then defaults."""
    if page_size is None:
        page_size = _env_int("RICH_GRID_PAGE_SIZE", DEFAULT_PAGE_SIZE, 1)
    if label_width is None:
        label_width = _env_int("RICH_GRID_LABEL_WIDTH", DEFAULT_LABEL_WIDTH, MIN_LABEL_WIDTH)
    if separator is None:
        separator = DEFAULT_SEPARATOR
    return GridConfig(page_size=page_size, label_width=label_width, separator=separator)
