"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperCommand, TyperGroup

from todomd.exceptions import InvalidCommandError
from todomd.utils.logger import get_logger
from todomd.utils.ui.formatters import format_error, format_hint


class SuggestingGroup(TyperGroup):
    """Typer group that reports unknown commands and suggests close matches.

    Similar to kubectl's "Did you mean this?" functionality.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if not args:
                raise
            attempted = args[0]
            error = InvalidCommandError(attempted)
            get_logger().error("command rejected: %s", error)

            format_error(str(error))
            suggestions = get_close_matches(
                attempted.lower(), list(self.commands.keys()), n=3, cutoff=0.6
            )
            if suggestions:
                if len(suggestions) == 1:
                    format_hint("Did you mean this?")
                else:
                    format_hint("Did you mean one of these?")
                for suggestion in suggestions:
                    format_hint(f"        {suggestion}")
            format_hint(f"Use '{ctx.info_name} help' for help")
            raise typer.Exit(error.exit_code) from e


class OperandCommand(TyperCommand):
    """Typer command that takes every argument after its name verbatim.

    Tokens such as ``-h``, ``--help`` or ``--`` are operands here, not options:
    ``todo add -- -h`` adds two items.
    """

    def parse_args(self, ctx, args):
        return super().parse_args(ctx, ["--", *args])
