"""Service layer for todomd."""

from todomd.services.todo_service import TodoService, get_todo_service, parse_item_id

__all__ = ["TodoService", "get_todo_service", "parse_item_id"]
