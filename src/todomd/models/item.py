"""Todo item data model."""

from pydantic import BaseModel


class TodoItem(BaseModel):
    """A single checklist entry.

    Items carry no identifier of their own; an item's id is its 1-based
    position in the list at the time a command runs.
    """

    name: str
    done: bool = False
