"""Pytest fixtures for rich_grid tests."""

from __future__ import annotations

import pytest

from rich_grid import GridConfig, PlainStyler, Row, TablePrompt


class FakeScreen:
    """ScreenWriter that records frames and cursor calls."""

    def __init__(self):
        self.frames: list[tuple[str, str]] = []
        self.calls: list[str] = []

    def render(self, message: str, bottom: str = "") -> None:
        self.frames.append((message, bottom))
        self.calls.append("render")

    def hide_cursor(self) -> None:
        self.calls.append("hide_cursor")

    def show_cursor(self) -> None:
        self.calls.append("show_cursor")

    def done(self) -> None:
        self.calls.append("done")

    @property
    def last_message(self) -> str:
        return self.frames[-1][0]

    @property
    def last_bottom(self) -> str:
        return self.frames[-1][1]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user environment overrides out of tests."""
    for name in ("RICH_GRID_PAGE_SIZE", "RICH_GRID_LABEL_WIDTH", "RICH_GRID_THEME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def color_size_rows():
    """Two rows: Color (no default) and Size (default "m")."""
    return [
        Row("Color", choices=[("Red", 1), ("Blue", 2)]),
        Row("Size", choices=[("S", "s"), ("M", "m")], default="m"),
    ]


@pytest.fixture
def fake_screen():
    return FakeScreen()


@pytest.fixture
def make_prompt(fake_screen):
    """Factory for plain-text prompts drawing into fake_screen."""

    def _make(rows, keys=None, **kwargs):
        if keys is not None:
            key_iter = iter(keys)
            kwargs.setdefault("read_key", lambda: next(key_iter))
        kwargs.setdefault("config", GridConfig())
        return TablePrompt(
            "Pick one per row",
            rows,
            screen=fake_screen,
            styler=PlainStyler(),
            **kwargs,
        )

    return _make
