"""Exceptions raised by rich_grid."""

from __future__ import annotations


class GridError(RuntimeError):
    """Base error for grid prompt operations."""


class GridConfigError(GridError, ValueError):
    """Raised when rows or layout settings are malformed at construction time."""
