"""todomd - a checklist manager backed by a plain markdown file."""

__version__ = "0.1.0"
