"""Tests for the TablePrompt session controller."""

from __future__ import annotations

import pytest
import readchar

from rich_grid import (
    UNSET,
    Abort,
    GridConfig,
    GridConfigError,
    KeyPress,
    LineSubmit,
    Row,
    SessionStatus,
    TablePrompt,
    prompt_table,
)

UP = KeyPress("up")
DOWN = KeyPress("down")
LEFT = KeyPress("left")
RIGHT = KeyPress("right")
SELECT = KeyPress("select")


def test_end_to_end_color_size(make_prompt, color_size_rows):
    prompt = make_prompt(color_size_rows)
    assert prompt.grid.answer() == {"Color": UNSET, "Size": "m"}

    prompt.dispatch(SELECT)
    assert prompt.grid.answer() == {"Color": 1, "Size": "m"}

    prompt.dispatch(DOWN)
    prompt.dispatch(SELECT)
    assert prompt.grid.answer() == {"Color": 1, "Size": "s"}

    prompt.dispatch(RIGHT)
    prompt.dispatch(RIGHT)
    prompt.dispatch(SELECT)
    assert prompt.grid.answer()["Size"] == "s"

    prompt.dispatch(RIGHT)
    prompt.dispatch(SELECT)
    assert prompt.grid.answer()["Size"] == "m"

    assert prompt.run([LineSubmit()]) == {"Color": 1, "Size": "m"}
    assert prompt.status is SessionStatus.ANSWERED


def test_every_mutation_triggers_render(make_prompt, color_size_rows, fake_screen):
    prompt = make_prompt(color_size_rows)
    for event in (DOWN, RIGHT, SELECT, UP):
        prompt.dispatch(event)
    assert len(fake_screen.frames) == 4


def test_commit_hides_help_and_undims_row(color_size_rows, fake_screen):
    prompt = TablePrompt("Pick", color_size_rows, screen=fake_screen, config=GridConfig())
    prompt.render()
    assert "<space>" in fake_screen.last_bottom
    assert fake_screen.last_message.split("\n")[2].startswith("[dim]")

    prompt.dispatch(SELECT)
    color_row = fake_screen.last_message.split("\n")[2]
    assert fake_screen.last_bottom == ""
    assert not color_row.startswith("[dim]")
    assert "[cyan]Red[/cyan]" in color_row


def test_select_on_empty_row_keeps_help_hint(make_prompt, fake_screen):
    prompt = make_prompt([Row("Empty", choices=[]), Row("Size", choices=["s", "m"])])
    prompt.dispatch(SELECT)
    assert prompt.has_committed is False
    assert "<space>" in fake_screen.last_bottom

    prompt.dispatch(DOWN)
    prompt.dispatch(SELECT)
    assert prompt.has_committed is True
    assert fake_screen.last_bottom == ""


def test_unset_answer_goes_to_validator(make_prompt):
    seen = []

    def validate(answer):
        seen.append(dict(answer))
        return True

    prompt = make_prompt([Row("Color", choices=["r", "b"])], validate=validate)
    assert prompt.run([LineSubmit()]) == {"Color": UNSET}
    assert seen == [{"Color": UNSET}]


def test_rejection_keeps_session_active(make_prompt, color_size_rows, fake_screen):
    def validate(answer):
        return True if answer["Color"] is not UNSET else "Pick a color"

    prompt = make_prompt(color_size_rows, validate=validate)
    prompt.dispatch(LineSubmit())

    assert prompt.status is SessionStatus.ACTIVE
    assert prompt.answer is None
    assert fake_screen.last_bottom == ">> Pick a color"

    prompt.dispatch(RIGHT)
    prompt.dispatch(SELECT)
    prompt.dispatch(LineSubmit())
    assert prompt.status is SessionStatus.ANSWERED
    assert prompt.answer == {"Color": 2, "Size": "m"}


def test_final_render_drops_cursor_highlight(color_size_rows, fake_screen):
    prompt = TablePrompt("Pick", color_size_rows, screen=fake_screen, config=GridConfig())
    prompt.dispatch(SELECT)
    assert "[reverse]" in fake_screen.last_message

    prompt.dispatch(LineSubmit())
    assert "[reverse]" not in fake_screen.last_message
    assert fake_screen.last_bottom == ""


def test_events_after_answer_are_ignored(make_prompt, color_size_rows, fake_screen):
    prompt = make_prompt(color_size_rows)
    prompt.dispatch(LineSubmit())
    frames = len(fake_screen.frames)

    prompt.dispatch(RIGHT)
    prompt.dispatch(SELECT)
    prompt.dispatch(LineSubmit())

    assert len(fake_screen.frames) == frames
    assert prompt.grid.answer() == {"Color": UNSET, "Size": "m"}


def test_run_stops_at_answer(make_prompt, color_size_rows):
    prompt = make_prompt(color_size_rows)
    answer = prompt.run([SELECT, LineSubmit(), DOWN, SELECT])
    assert answer == {"Color": 1, "Size": "m"}
    assert prompt.cursor.row == 0


def test_abort_returns_none(make_prompt, color_size_rows):
    prompt = make_prompt(color_size_rows)
    assert prompt.run([SELECT, Abort(), LineSubmit()]) is None
    assert prompt.status is SessionStatus.ABORTED


def test_filter_shapes_the_answer(make_prompt, color_size_rows):
    prompt = make_prompt(color_size_rows, filter=lambda answer: list(answer.values()))
    assert prompt.run([LineSubmit()]) == [UNSET, "m"]


def test_show_reads_keys_until_enter(make_prompt, color_size_rows, fake_screen):
    keys = [readchar.key.DOWN, "x", readchar.key.LEFT, " ", readchar.key.UP, "h", " ", "\r"]
    prompt = make_prompt(color_size_rows, keys=keys)

    assert prompt.show() == {"Color": 1, "Size": "m"}
    assert fake_screen.calls[0] == "hide_cursor"
    assert fake_screen.calls[-2:] == ["done", "show_cursor"]


def test_show_treats_ctrl_c_as_abort(make_prompt, color_size_rows, fake_screen):
    def read_key():
        raise KeyboardInterrupt

    prompt = make_prompt(color_size_rows, read_key=read_key)
    assert prompt.show() is None
    assert prompt.status is SessionStatus.ABORTED
    assert fake_screen.calls[-1] == "show_cursor"


def test_cursor_restored_when_final_render_fails(make_prompt, color_size_rows, fake_screen):
    prompt = make_prompt(color_size_rows, keys=["\r"])

    def failing_render(message, bottom=""):
        if prompt.status is SessionStatus.ANSWERED:
            raise OSError("terminal gone")
        fake_screen.calls.append("render")

    fake_screen.render = failing_render

    with pytest.raises(OSError):
        prompt.show()
    assert fake_screen.calls[-2:] == ["done", "show_cursor"]


def test_empty_rows_are_navigable_without_errors(make_prompt):
    prompt = make_prompt([Row("A", choices=["x", "y", "z"]), Row("B", choices=[])])
    prompt.dispatch(RIGHT)
    prompt.dispatch(RIGHT)
    prompt.dispatch(DOWN)
    prompt.dispatch(RIGHT)
    prompt.dispatch(SELECT)
    assert prompt.cursor.column == 0
    assert prompt.run([LineSubmit()]) == {"A": UNSET, "B": UNSET}


def test_page_size_shortcut_overrides_config(make_prompt):
    rows = [Row(f"row{i}", choices=["a"]) for i in range(6)]
    prompt = make_prompt(rows, page_size=2)
    assert prompt.config.page_size == 2
    assert "4 more below" in prompt.frame().message


def test_bad_rows_fail_at_construction(make_prompt):
    with pytest.raises(GridConfigError):
        make_prompt([Row("A", choices=["x"]), Row("A", choices=["y"])])


def test_prompt_table_runs_a_session(color_size_rows, fake_screen):
    keys = iter([" ", "\r"])
    answer = prompt_table(
        "Pick",
        color_size_rows,
        screen=fake_screen,
        read_key=lambda: next(keys),
    )
    assert answer == {"Color": 1, "Size": "m"}
