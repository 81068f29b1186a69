"""Storage for todo items."""

from todomd.repositories.todo_file import (
    TodoFileRepository,
    format_todo_line,
    parse_todo_line,
    parse_todo_lines,
    serialize_todos,
)

__all__ = [
    "TodoFileRepository",
    "format_todo_line",
    "parse_todo_line",
    "parse_todo_lines",
    "serialize_todos",
]
