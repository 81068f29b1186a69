"""Shared test fixtures and configuration.

Keeps every test away from the real home directory and log directory.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from todomd.config import get_settings


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path_factory):
    """Send the rotating log file to a temporary directory."""
    import todomd.utils.logger as logger_mod

    log_dir = tmp_path_factory.mktemp("logs")
    logger_mod._root = None
    logging.getLogger("todomd").handlers.clear()

    with patch("todomd.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir

    root = logging.getLogger("todomd")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    logger_mod._root = None


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def todo_file(tmp_path, monkeypatch):
    """An empty checklist file that TODO_FILE points at."""
    path = tmp_path / "todo.md"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("TODO_FILE", str(path))
    return path


@pytest.fixture()
def three_items(todo_file):
    """Checklist with three items, the second one done."""
    todo_file.write_text(
        "- [ ] first\n- [X] second\n- [ ] third\n", encoding="utf-8"
    )
    return todo_file
