"""Todo service - Business logic for checklist operations.

The service owns the ordered item list for one invocation. Item ids are
1-based positions, so removing an item renumbers everything below it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from todomd.config import get_settings
from todomd.exceptions import IdParseError, InvalidIdError, MissingOperandsError
from todomd.models import TodoItem
from todomd.repositories import TodoFileRepository
from todomd.utils.logger import get_logger

_ID_RE = re.compile(r"\+?[0-9]+")


def parse_item_id(raw: str) -> int:
    """Parse a single id argument as a non-negative integer.

    Raises:
        IdParseError: If *raw* is not made of decimal digits
    """
    if not _ID_RE.fullmatch(raw):
        raise IdParseError(raw)
    return int(raw)


class TodoService:
    """Service for checklist business logic.

    Mutations only change the in-memory list; call :meth:`save` to persist.
    """

    def __init__(self, repository: TodoFileRepository, items: list[TodoItem]):
        """Initialize the service.

        Args:
            repository: Where the items came from and are written back to
            items: Items in file order
        """
        self.repository = repository
        self.items = items
        self.logger = get_logger("service")

    @classmethod
    def load(cls, repository: TodoFileRepository) -> TodoService:
        """Create a service from the repository's current contents."""
        return cls(repository, repository.load())

    def save(self) -> None:
        self.repository.save(self.items)

    def resolve_ids(self, raw_ids: Iterable[str]) -> list[int]:
        """Validate id arguments against the current list.

        Every argument is checked before anything is returned, so a bad id
        anywhere leaves the list untouched.

        Returns:
            Distinct ids, highest first

        Raises:
            MissingOperandsError: If no ids were given
            IdParseError: If an argument is not a non-negative integer
            InvalidIdError: If an id is outside ``1..len(items)``
        """
        raw_ids = list(raw_ids)
        if not raw_ids:
            raise MissingOperandsError("no item ids given")

        ids = [parse_item_id(raw) for raw in raw_ids]
        for item_id in ids:
            if not 1 <= item_id <= len(self.items):
                raise InvalidIdError(item_id)

        return sorted(set(ids), reverse=True)

    def add_items(self, names: Iterable[str]) -> list[TodoItem]:
        """Append one open item per name, in order.

        Raises:
            MissingOperandsError: If no names were given
        """
        names = list(names)
        if not names:
            raise MissingOperandsError("no items to add")

        added = [TodoItem(name=name) for name in names]
        self.items.extend(added)
        self.logger.debug("added %d item(s)", len(added))
        return added

    def mark_done(self, raw_ids: Iterable[str]) -> list[int]:
        """Mark the referenced items as done."""
        return self._set_done(raw_ids, True)

    def mark_undone(self, raw_ids: Iterable[str]) -> list[int]:
        """Clear the done flag of the referenced items."""
        return self._set_done(raw_ids, False)

    def _set_done(self, raw_ids: Iterable[str], done: bool) -> list[int]:
        ids = self.resolve_ids(raw_ids)
        for item_id in ids:
            self.items[item_id - 1].done = done
        self.logger.debug("set done=%s on ids %s", done, ids)
        return ids

    def remove_items(self, raw_ids: Iterable[str]) -> list[TodoItem]:
        """Remove the referenced items.

        Ids refer to positions before the removal; items are deleted from the
        highest id down so pending positions stay valid.

        Returns:
            Removed items, highest id first
        """
        ids = self.resolve_ids(raw_ids)
        removed = [self.items.pop(item_id - 1) for item_id in ids]
        self.logger.debug("removed ids %s", ids)
        return removed


def get_todo_service() -> TodoService:
    """Load the checklist named by the current settings."""
    return TodoService.load(TodoFileRepository(get_settings().todo_file))
