"""Error kinds raised by todomd.

Every error carries the process exit code it should end the invocation
with; ``command_wrapper`` turns them into a message on stderr.
"""

from todomd.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_FILE_OPEN,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_IO,
    ERROR_SYNTAX,
)


class AppError(Exception):
    """Base application error with exit code."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(AppError):
    """Raised when the todo file location cannot be determined."""

    exit_code = ERROR_CONFIG


class FileOpenError(AppError):
    """Raised when the todo file is missing or cannot be opened."""

    exit_code = ERROR_FILE_OPEN


class TodoSyntaxError(AppError):
    """Raised when a line of the todo file is not a checklist entry."""

    exit_code = ERROR_SYNTAX

    def __init__(self, line: str):
        super().__init__(f'Invalid syntax detected: "{line}"')
        self.line = line


class TodoIOError(AppError):
    """Raised when reading or writing the todo file fails after it was opened."""

    exit_code = ERROR_IO


class InvalidCommandError(AppError):
    """Raised for an unrecognised command word."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, command: str):
        super().__init__(f"invalid command: {command}")
        self.command = command


class MissingOperandsError(AppError):
    """Raised when a command that needs operands gets none."""

    exit_code = ERROR_INVALID_ARGS


class IdParseError(AppError):
    """Raised when an item id argument is not a non-negative integer."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, raw: str):
        super().__init__(f"Error parsing id: '{raw}' is not a non-negative integer")
        self.raw = raw


class InvalidIdError(AppError):
    """Raised when an item id does not refer to an item in the list."""

    exit_code = ERROR_INVALID_ARGS

    def __init__(self, item_id: int):
        super().__init__(f"invalid id {item_id}")
        self.item_id = item_id
