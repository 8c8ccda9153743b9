# tests/conftest.py

import logging
from pathlib import Path

import pytest

from todo.manager import TaskManager


@pytest.fixture()
def todo_file(tmp_path: Path) -> Path:
    return tmp_path / "todo.txt"


@pytest.fixture()
def manager(todo_file: Path) -> TaskManager:
    """Empty, loaded store backed by a temp file."""
    m = TaskManager(todo_file=todo_file)
    m.load()
    return m


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path) -> None:
    """Keep tests away from the real ~/todo.txt."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))
    monkeypatch.delenv("TODO_FILE", raising=False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() calls logging.basicConfig; undo it between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
