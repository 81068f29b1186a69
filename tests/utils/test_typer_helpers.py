"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import typer

from todomd.utils.typer_helpers import SuggestingGroup


def _make_group():
    group = SuggestingGroup(name="todo")
    group.commands = {
        "list": MagicMock(),
        "add": MagicMock(),
        "done": MagicMock(),
        "undo": MagicMock(),
        "remove": MagicMock(),
        "help": MagicMock(),
    }
    return group


def _ctx():
    ctx = MagicMock()
    ctx.info_name = "todo"
    return ctx


def test_valid_command_passes_through():
    group = _make_group()
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        return_value=("add", MagicMock(), ["x"]),
    ):
        assert group.resolve_command(_ctx(), ["add", "x"])[0] == "add"


def test_unknown_command_exits_with_invalid_args():
    group = _make_group()
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=LookupError("No such command 'ad'."),
    ):
        with patch("todomd.utils.typer_helpers.format_error") as mock_error:
            with patch("todomd.utils.typer_helpers.format_hint") as mock_hint:
                with pytest.raises(typer.Exit) as exc_info:
                    group.resolve_command(_ctx(), ["ad"])

    assert exc_info.value.exit_code == 2
    mock_error.assert_called_once_with("invalid command: ad")
    hints = [c.args[0] for c in mock_hint.call_args_list]
    assert "Did you mean this?" in hints
    assert "        add" in hints
    assert hints[-1] == "Use 'todo help' for help"


def test_unknown_command_without_suggestion_still_hints_help():
    group = _make_group()
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=LookupError("No such command"),
    ):
        with patch("todomd.utils.typer_helpers.format_error"):
            with patch("todomd.utils.typer_helpers.format_hint") as mock_hint:
                with pytest.raises(typer.Exit):
                    group.resolve_command(_ctx(), ["zzzzzz"])

    assert [c.args[0] for c in mock_hint.call_args_list] == [
        "Use 'todo help' for help"
    ]


def test_usage_error_without_args_is_reraised():
    group = _make_group()
    with patch.object(
        SuggestingGroup.__bases__[0],
        "resolve_command",
        side_effect=LookupError("boom"),
    ):
        with pytest.raises(LookupError):
            group.resolve_command(_ctx(), [])


def test_operand_command_passes_help_and_separator_through():
    from todomd.utils.typer_helpers import OperandCommand

    seen = []
    app = typer.Typer()

    @app.command(cls=OperandCommand)
    def collect(values: list[str] | None = typer.Argument(None)):
        seen.extend(values or [])

    from typer.testing import CliRunner

    result = CliRunner().invoke(app, ["-h", "a", "--", "--help", "-x"])

    assert result.exit_code == 0
    assert seen == ["-h", "a", "--", "--help", "-x"]
