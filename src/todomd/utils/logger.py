"""Rotating file log for todomd, kept under platformdirs user_log_dir.

The terminal belongs to the checklist output and error messages, so
nothing here writes to stdout or stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

ROOT_LOGGER_NAME = "todomd"
LOG_FILE_NAME = "todomd.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_root: logging.Logger | None = None


def _file_handler(log_dir: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def _configure_root() -> logging.Logger:
    global _root
    if _root is not None:
        return _root

    log_dir = Path(user_log_dir(ROOT_LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG)
    if not root.handlers:
        root.addHandler(_file_handler(log_dir))
    root.propagate = False

    _root = root
    return _root


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the todomd logger, or a child logger for *component*.

    The file handler is attached to the root ``todomd`` logger on first
    call; child loggers such as ``todomd.repository`` inherit it.
    """
    root = _configure_root()
    if component is None:
        return root
    return root.getChild(component)
