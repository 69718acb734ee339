"""Headless editing core: highlighting, completion, smart editing, find/replace and sessions."""

__version__ = "0.1.0"
__all__ = ["highlighter", "completion", "editor", "findreplace", "session"]