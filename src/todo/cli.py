#!/usr/bin/env python3
"""
TODO - CLI Interface
====================
Command-line tool for a plain-text to-do list.

Usage:
    todo
    todo list
    todo add "Finish the Arch setup"
    todo complete 1
    todo rm 2
    todo help
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from pydantic import ValidationError

from . import __version__
from .config import Settings
from .errors import StorageError
from .manager import TaskManager
from .schema import parse_id as parse_task_id

logger = logging.getLogger("todo")

EPILOG = """
Examples:
  todo list                           Display all tasks
  todo add "Finish the Arch setup"    Add a new task
  todo add -d "before 6pm" Call mom   Add a task with a description
  todo complete 1                     Complete task 1 (removes it)
  todo rm 2                           Remove task 2
"""


# Extra tokens after these commands are ignored
IGNORES_EXTRA_ARGS = ("list", "complete", "rm", "help")


class TodoArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1"""

    def error(self, message: str) -> NoReturn:
        print(f"Error: {message}", file=sys.stderr)
        self.print_help(sys.stderr)
        self.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = TodoArgumentParser(
        prog="todo",
        description="Simple CLI To-Do List",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument("-f", "--file", type=Path, help="Path to the todo file (default: ~/todo.txt)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="command", help="Commands")

    # LIST command
    subparsers.add_parser("list", help="Display all tasks")

    # ADD command
    add_parser = subparsers.add_parser("add", help="Add a new task with a name")
    add_parser.add_argument("-d", "--description", default="", help="Optional description, given before the name")
    add_parser.add_argument("name", nargs=argparse.REMAINDER, help="Task name; every remaining word is part of it")

    # COMPLETE command
    complete_parser = subparsers.add_parser("complete", help="Mark a task as completed and remove it")
    complete_parser.add_argument("id", help="Task ID")

    # RM command
    rm_parser = subparsers.add_parser("rm", help="Remove a task by its ID")
    rm_parser.add_argument("id", help="Task ID")

    # HELP command
    subparsers.add_parser("help", help="Show this help message")

    return parser


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Send log records to stderr at the configured level"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level_value,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def fail(message: str) -> int:
    """Report a user-facing error and return the failure exit code"""
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras:
        if args.command not in IGNORES_EXTRA_ARGS:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
        logger.debug(f"Ignoring extra arguments: {extras}")

    if args.command == "help":
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env()
        if args.file is not None:
            settings = settings.model_copy(update={"todo_file": args.file.expanduser()})
    except ValidationError as e:
        return fail(f"Invalid configuration: {e.errors()[0]['msg']}")

    configure_logging(settings, verbose=args.verbose)

    manager = TaskManager(todo_file=settings.todo_file)

    try:
        manager.load()

        # Execute command
        if args.command in (None, "list"):
            print(manager.get_list_report())

        elif args.command == "add":
            name = " ".join(args.name).strip()
            if not name:
                return fail("'add' requires a task name.")
            try:
                task = manager.add_task(name, args.description)
            except ValidationError as e:
                return fail(f"Invalid task: {e.errors()[0]['msg']}")
            print(f"Added task: \"{task.name}\"")

        elif args.command == "complete":
            task_id = parse_task_id(args.id)
            if task_id is None:
                return fail("Invalid task ID. Please enter a number.")
            task = manager.complete_task(task_id)
            if not task:
                return fail(f"Task with ID {task_id} not found.")
            print(f"Marked task {task_id} as completed and removed.")

        elif args.command == "rm":
            task_id = parse_task_id(args.id)
            if task_id is None:
                return fail("Invalid task ID. Please enter a number.")
            task = manager.remove_task(task_id)
            if not task:
                return fail(f"Task with ID {task_id} not found.")
            print(f"Removed task {task_id}: \"{task.name}\"")

    except StorageError as e:
        logger.debug("Storage failure", exc_info=True)
        return fail(str(e))

    return 0


if __name__ == "__main__":
    sys.exit(main())
