"""Command 'remove' of todomd"""

from typing import Annotated

import typer

from todomd.exceptions import MissingOperandsError
from todomd.services import get_todo_service
from todomd.utils.ui.formatters import format_todo_list

from .decorators import command_wrapper


@command_wrapper
def remove_items(
    item_ids: Annotated[
        list[str] | None,
        typer.Argument(help="Item number(s) as shown by 'todo list'"),
    ] = None,
) -> None:
    """
    Remove todo items from the list.

    Ids refer to the numbering before the removal; the remaining items are
    renumbered afterwards.
    """
    if not item_ids:
        raise MissingOperandsError("no item ids given")

    service = get_todo_service()
    service.remove_items(item_ids)
    service.save()
    format_todo_list(service.items)
