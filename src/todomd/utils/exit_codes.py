"""
Exit codes for todomd.

Each error kind maps to its own code so scripts wrapping the CLI can tell a
broken checklist file apart from a typo on the command line.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Unknown command, missing operands, bad or out-of-range item ids
ERROR_INVALID_ARGS = 2

# Backing file is missing or cannot be opened
ERROR_FILE_OPEN = 3

# A line of the backing file does not follow the checklist syntax
ERROR_SYNTAX = 4

# Reading or writing the backing file failed
ERROR_IO = 5

# The backing file location could not be resolved from the environment
ERROR_CONFIG = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_FILE_OPEN: "ERROR_FILE_OPEN",
        ERROR_SYNTAX: "ERROR_SYNTAX",
        ERROR_IO: "ERROR_IO",
        ERROR_CONFIG: "ERROR_CONFIG",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_FILE_OPEN: "Todo file not found or not readable",
        ERROR_SYNTAX: "Todo file contains a malformed line",
        ERROR_IO: "Reading or writing the todo file failed",
        ERROR_CONFIG: "Set TODO_FILE or HOME to locate the todo file",
    }
    return descriptions.get(code, "Unknown error")
