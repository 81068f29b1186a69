"""Configuration for todomd.

The only setting is the location of the todo file, taken from the
environment once per invocation.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

from todomd.exceptions import ConfigError

TODO_FILE_ENV = "TODO_FILE"
DEFAULT_FILE_NAME = ".todo.md"


class Settings(BaseModel):
    """Resolved runtime settings."""

    todo_file: Path = Field(..., description="Path of the backing checklist file")

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Settings:
        """Build settings from an environment mapping.

        ``TODO_FILE`` wins; otherwise the file is ``$HOME/.todo.md``.

        Raises:
            ConfigError: If neither ``TODO_FILE`` nor ``HOME`` is set
        """
        override = environ.get(TODO_FILE_ENV)
        if override:
            return cls(todo_file=Path(override))

        home = environ.get("HOME")
        if not home:
            raise ConfigError(
                f"HOME environment variable should be set when {TODO_FILE_ENV} is not"
            )
        return cls(todo_file=Path(home) / DEFAULT_FILE_NAME)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings for the current process environment."""
    return Settings.from_env(os.environ)
