"""
TODO - Task Manager
===================
Handles persistence and the add/complete/remove operations.
The todo file is rewritten in full after every change.
"""

import logging
from pathlib import Path
from typing import Optional, List

from .errors import StorageError
from .schema import Task, task_from_line

logger = logging.getLogger("todo")

EMPTY_MESSAGE = "Your to-do list is empty! 🎉"
LIST_HEADER = "Your To-Do List:"


class TaskManager:
    """
    Task store backed by a single delimited text file.

    One instance per invocation: load(), run one operation, exit.
    There is no locking; concurrent processes race and the last write wins.
    """

    def __init__(self, todo_file: Path):
        self.todo_file = Path(todo_file)
        self._tasks: List[Task] = []

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load(self) -> List[Task]:
        """Load tasks from the todo file, skipping malformed lines"""
        self._tasks = []

        try:
            with open(self.todo_file, "r", encoding="utf-8") as f:
                lines = f.readlines()
        except FileNotFoundError:
            logger.debug(f"No todo file at {self.todo_file}, starting empty")
            return self.tasks
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError("read", self.todo_file, str(e)) from e

        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            task = task_from_line(line)
            if task is None:
                logger.warning(
                    f"Skipping invalid task format on line {lineno}: {line.rstrip()!r}"
                )
                continue
            self._tasks.append(task)

        logger.info(f"📂 Loaded {len(self._tasks)} task(s) from {self.todo_file}")
        return self.tasks

    def save(self) -> None:
        """Overwrite the todo file with the current tasks"""
        try:
            self.todo_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.todo_file, "w", encoding="utf-8") as f:
                for task in self._tasks:
                    f.write(task.to_line() + "\n")
        except OSError as e:
            raise StorageError("write", self.todo_file, str(e)) from e

        logger.info(f"💾 Saved {len(self._tasks)} task(s) to {self.todo_file}")

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def next_id(self) -> int:
        """Highest existing id + 1, or 1 for an empty list"""
        return max((t.id for t in self._tasks), default=0) + 1

    def add_task(self, name: str, description: str = "") -> Task:
        """Append a new pending task and save"""
        task = Task(id=self.next_id(), name=name, description=description)

        self._tasks.append(task)
        try:
            self.save()
        except StorageError:
            self._tasks.remove(task)
            raise

        logger.info(f"➕ Added task {task.id}: {task.name}")
        return task

    def complete_task(self, task_id: int) -> Optional[Task]:
        """Mark a task completed and drop it from the list"""
        task = self._pop_task(task_id)
        if not task:
            return None

        logger.info(f"✅ Completed task {task_id}: {task.name}")
        return task.model_copy(update={"completed": True})

    def remove_task(self, task_id: int) -> Optional[Task]:
        """Delete a task without completing it"""
        task = self._pop_task(task_id)
        if not task:
            return None

        logger.info(f"🗑️ Removed task {task_id}: {task.name}")
        return task

    # ========================================
    # HELPER METHODS
    # ========================================

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _pop_task(self, task_id: int) -> Optional[Task]:
        """Remove a task and save; restores it if the save fails"""
        task = self.get_task(task_id)
        if not task:
            logger.debug(f"Task {task_id} not found")
            return None

        index = self._tasks.index(task)
        del self._tasks[index]
        try:
            self.save()
        except StorageError:
            self._tasks.insert(index, task)
            raise
        return task

    # ========================================
    # REPORTING
    # ========================================

    def get_list_report(self) -> str:
        """Generate the text printed by `todo list`"""
        if not self._tasks:
            return EMPTY_MESSAGE

        lines = [LIST_HEADER]
        for task in self._tasks:
            lines.extend(task.display())
        return "\n".join(lines)
