"""Output formatters for the checklist and diagnostics."""

from collections.abc import Sequence

import typer
from rich.markup import escape

from todomd.models import TodoItem
from todomd.utils.ui.console import get_error_console


def format_todo_item(index: int, item: TodoItem) -> str:
    """Render one numbered item; done items are struck through."""
    name = typer.style(item.name, strikethrough=True) if item.done else item.name
    return f"{index}.\t{name}"


def format_todo_list(items: Sequence[TodoItem]) -> None:
    """Print the checklist to stdout, numbered from 1.

    Plain ``echo`` keeps the tab separator intact and drops the ANSI
    styling when stdout is not a terminal.
    """
    for index, item in enumerate(items, start=1):
        typer.echo(format_todo_item(index, item))


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    get_error_console().print(
        f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True
    )


def format_hint(message: str) -> None:
    get_error_console().print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)
