"""Command 'add' of todomd"""

from typing import Annotated

import typer

from todomd.exceptions import MissingOperandsError
from todomd.services import get_todo_service
from todomd.utils.ui.formatters import format_todo_list

from .decorators import command_wrapper


@command_wrapper
def add(
    names: Annotated[
        list[str] | None,
        typer.Argument(help="Item names, one new item per argument"),
    ] = None,
) -> None:
    """
    Add items to the todo list.

    Examples:
      todo add "buy milk"
      todo add "call mom" "water the plants"
    """
    if not names:
        raise MissingOperandsError("no items to add")

    service = get_todo_service()
    service.add_items(names)
    service.save()
    format_todo_list(service.items)
