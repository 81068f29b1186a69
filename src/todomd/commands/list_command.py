"""Command 'list' of todomd"""

from todomd.services import get_todo_service
from todomd.utils.ui.formatters import format_todo_list

from .decorators import command_wrapper


@command_wrapper
def list_todos() -> None:
    """List all todo items (same as no argument)."""
    service = get_todo_service()
    format_todo_list(service.items)
