"""Markdown checklist file storage.

The file holds one item per line::

    - [ ] buy milk
    - [X] call mom

Any other line makes the whole file unreadable; nothing is skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from todomd.exceptions import FileOpenError, TodoIOError, TodoSyntaxError
from todomd.models import TodoItem
from todomd.utils.logger import get_logger

DONE_MARKER = "X"
OPEN_MARKER = " "

_LINE_RE = re.compile(r"- \[([ X])\] (.*)")


def parse_todo_line(line: str) -> TodoItem:
    """Parse a single checklist line.

    Raises:
        TodoSyntaxError: If the line is not ``- [ ] name`` or ``- [X] name``
    """
    match = _LINE_RE.match(line)
    if match is None:
        raise TodoSyntaxError(line)
    return TodoItem(name=match.group(2), done=match.group(1) == DONE_MARKER)


def parse_todo_lines(lines: Iterable[str]) -> list[TodoItem]:
    """Parse checklist lines in order, stopping at the first bad one."""
    return [parse_todo_line(line) for line in lines]


def split_lines(text: str) -> list[str]:
    """Split file text into lines.

    Only ``\\n`` separates lines, a trailing ``\\r`` is dropped, and a final
    newline does not start another line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_todo_line(item: TodoItem) -> str:
    """Render an item as a checklist line, without the newline."""
    marker = DONE_MARKER if item.done else OPEN_MARKER
    return f"- [{marker}] {item.name}"


def serialize_todos(items: Iterable[TodoItem]) -> str:
    """Render items as the full file text, one newline-terminated line each."""
    return "".join(f"{format_todo_line(item)}\n" for item in items)


class TodoFileRepository:
    """Reads and overwrites a checklist file at a fixed path."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.logger = get_logger("repository")

    def load(self) -> list[TodoItem]:
        """Read and parse the whole file.

        Raises:
            FileOpenError: If the file does not exist or cannot be opened
            TodoIOError: If reading or decoding fails
            TodoSyntaxError: If any line is malformed
        """
        try:
            f = open(self.path, encoding="utf-8", newline="")
        except OSError as e:
            raise FileOpenError(
                f"Error opening file '{self.path}': {e.strerror or e}"
            ) from e

        with f:
            try:
                text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                raise TodoIOError(f"Error reading file: {e}") from e

        items = parse_todo_lines(split_lines(text))
        self.logger.debug("loaded %d item(s) from %s", len(items), self.path)
        return items

    def save(self, items: list[TodoItem]) -> None:
        """Replace the file contents with *items*.

        Raises:
            TodoIOError: If the file cannot be written
        """
        try:
            with open(self.path, "w", encoding="utf-8", newline="\n") as f:
                f.write(serialize_todos(items))
        except OSError as e:
            raise TodoIOError(f"Error writing to file: {e}") from e
        self.logger.debug("saved %d item(s) to %s", len(items), self.path)
