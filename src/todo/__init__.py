"""
TODO - Plain-Text To-Do List
============================

A single-user task list stored in ~/todo.txt, one task per line.

Usage:
    from todo import TaskManager

    manager = TaskManager(Path.home() / "todo.txt")
    manager.load()

    task = manager.add_task("Buy milk")
    manager.complete_task(task.id)
    print(manager.get_list_report())
"""

__version__ = "1.0.0"

from .schema import (
    Task,
    DELIMITER,
    task_from_line,
)
from .errors import TodoError, StorageError
from .config import Settings
from .manager import TaskManager

__all__ = [
    "TaskManager",
    "Task",
    "DELIMITER",
    "task_from_line",
    "Settings",
    "TodoError",
    "StorageError",
]
