"""Tests for checklist and error output formatting."""

from __future__ import annotations

from todomd.models import TodoItem
from todomd.utils.ui.formatters import (
    format_error,
    format_todo_item,
    format_todo_list,
)


def test_open_item_is_plain():
    assert format_todo_item(1, TodoItem(name="task1")) == "1.\ttask1"


def test_done_item_is_struck_through():
    line = format_todo_item(2, TodoItem(name="task2", done=True))
    assert line == "2.\t\x1b[9mtask2\x1b[0m"


def test_list_strips_styles_when_not_a_terminal(capsys):
    format_todo_list([TodoItem(name="a"), TodoItem(name="b", done=True)])
    assert capsys.readouterr().out == "1.\ta\n2.\tb\n"


def test_error_goes_to_stderr_and_keeps_brackets(capsys):
    format_error('Invalid syntax detected: "- [x] lower"')
    captured = capsys.readouterr()
    assert captured.out == ""
    assert 'Error: Invalid syntax detected: "- [x] lower"' in captured.err
