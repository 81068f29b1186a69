"""Data models for todomd."""

from todomd.models.item import TodoItem

__all__ = ["TodoItem"]
