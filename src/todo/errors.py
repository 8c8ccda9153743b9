"""Exceptions raised by the task store."""

from pathlib import Path


class TodoError(Exception):
    """Base class for todo errors"""


class StorageError(TodoError):
    """The todo file could not be read or written"""

    def __init__(self, action: str, path: Path, reason: str):
        self.action = action
        self.path = path
        self.reason = reason
        super().__init__(f"Could not {action} {path}: {reason}")
