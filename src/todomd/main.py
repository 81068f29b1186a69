"""Main entry point for todomd."""

import typer

from todomd import __version__
from todomd.commands import (
    add_command,
    done_command,
    help_command,
    list_command,
    remove_command,
    undo_command,
)
from todomd.config import DEFAULT_FILE_NAME, TODO_FILE_ENV
from todomd.utils.typer_helpers import OperandCommand, SuggestingGroup

# list and help ignore anything after the command word
_IGNORE_EXTRA = {"allow_extra_args": True}

app = typer.Typer(
    name="todo",
    cls=SuggestingGroup,
    help="Keep a todo checklist in a plain markdown file.",
    epilog=(
        f"By default the items are stored in $HOME/{DEFAULT_FILE_NAME}. "
        f"This can be changed by setting the environment variable {TODO_FILE_ENV}."
    ),
    context_settings={
        "help_option_names": ["-h", "--help"],
        "token_normalize_func": str.lower,
    },
    rich_markup_mode=None,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"todomd {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
) -> None:
    """Keep a todo checklist in a plain markdown file."""
    if ctx.invoked_subcommand is None:
        list_command.list_todos()


app.command("list", cls=OperandCommand, context_settings=_IGNORE_EXTRA)(
    list_command.list_todos
)
app.command("add", cls=OperandCommand)(add_command.add)
app.command("done", cls=OperandCommand)(done_command.done_items)
app.command("undo", cls=OperandCommand)(undo_command.undo_items)
app.command("remove", cls=OperandCommand)(remove_command.remove_items)
app.command("help", cls=OperandCommand, context_settings=_IGNORE_EXTRA)(
    help_command.show_help
)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
