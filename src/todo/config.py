"""Settings for the todo CLI, read from environment variables.

TODO_FILE       path of the todo file (default: ~/todo.txt)
TODO_LOG_LEVEL  logging level name (default: WARNING)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

ENV_PREFIX = "TODO"
DEFAULT_FILENAME = "todo.txt"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def default_todo_file() -> Path:
    """~/todo.txt; home lookup is left to the platform"""
    return Path.home() / DEFAULT_FILENAME


class Settings(BaseModel):
    todo_file: Path
    log_level: str = "WARNING"

    @field_validator("todo_file")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @staticmethod
    def from_env() -> "Settings":
        todo_file = _env(_k("FILE"))
        return Settings(
            todo_file=Path(todo_file) if todo_file else default_todo_file(),
            log_level=_env(_k("LOG_LEVEL")) or "WARNING",
        )
