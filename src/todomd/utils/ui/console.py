"""Console utilities for todomd."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console for stdout, or for stderr diagnostics."""
    return Console(stderr=stderr, highlight=False, emoji=False)


def get_error_console() -> Console:
    return get_console(stderr=True)
