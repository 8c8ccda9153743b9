"""
TODO - Task Schema Definition
=============================
One task per line in a plain-text file:

    <id>|<name>|<description>|<0|1>

No escaping is performed, so the delimiter is rejected in free text.
"""

from typing import Optional, List
from pydantic import BaseModel, Field, PositiveInt, field_validator


DELIMITER = "|"
FIELD_COUNT = 4


class Task(BaseModel):
    """Individual to-do item"""
    id: PositiveInt
    name: str = Field(min_length=1)
    description: str = ""
    completed: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name", "description")
    @classmethod
    def _no_delimiter(cls, value: str) -> str:
        if DELIMITER in value:
            raise ValueError(f"must not contain '{DELIMITER}'")
        if "\n" in value or "\r" in value:
            raise ValueError("must be a single line")
        return value

    def to_line(self) -> str:
        """Serialize the task for the todo file"""
        return DELIMITER.join([
            str(self.id),
            self.name,
            self.description,
            "1" if self.completed else "0",
        ])

    def display(self) -> List[str]:
        """Lines shown by `todo list`"""
        marker = "[DONE]" if self.completed else "[PENDING]"
        lines = [f"[{self.id}] {marker} {self.name}"]
        if self.description:
            lines.append(f"    Description: {self.description}")
        return lines


def split_line(line: str) -> Optional[List[str]]:
    """Split a stored line into its four raw fields, or None if malformed"""
    fields = line.rstrip("\r\n").split(DELIMITER)
    if len(fields) != FIELD_COUNT:
        return None
    return fields


def parse_id(raw: str) -> Optional[int]:
    """Parse a task id; None unless it is a positive integer"""
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def task_from_line(line: str) -> Optional[Task]:
    """Build a Task from a stored line, or None if the record is unusable"""
    fields = split_line(line)
    if fields is None:
        return None

    id_str, name, description, completed_str = fields
    task_id = parse_id(id_str)
    if task_id is None or not name.strip():
        return None

    return Task(
        id=task_id,
        name=name,
        description=description,
        completed=completed_str.strip() == "1",
    )
