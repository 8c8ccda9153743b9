# tests/test_schema.py

import pytest
from pydantic import ValidationError

from todo.schema import Task, parse_id, split_line, task_from_line


def test_to_line_format() -> None:
    task = Task(id=3, name="Call mom", description="before 6pm")
    assert task.to_line() == "3|Call mom|before 6pm|0"
    assert Task(id=1, name="x", completed=True).to_line() == "1|x||1"


def test_name_is_trimmed_and_required() -> None:
    assert Task(id=1, name="  Buy milk \t").name == "Buy milk"
    with pytest.raises(ValidationError):
        Task(id=1, name="   ")


@pytest.mark.parametrize("field", ["name", "description"])
def test_delimiter_rejected_in_free_text(field) -> None:
    data = {"id": 1, "name": "ok", field: "a|b"}
    with pytest.raises(ValidationError):
        Task(**data)


def test_line_breaks_rejected() -> None:
    with pytest.raises(ValidationError):
        Task(id=1, name="two\nlines")


def test_id_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Task(id=0, name="zero")


def test_task_from_line() -> None:
    task = task_from_line("7|Write report|Q3 numbers|1\n")
    assert task == Task(id=7, name="Write report", description="Q3 numbers", completed=True)


def test_task_from_line_only_literal_one_is_completed() -> None:
    assert task_from_line("1|a||0").completed is False
    assert task_from_line("1|a||yes").completed is False


@pytest.mark.parametrize(
    "line",
    [
        "1|missing fields",
        "1|a|b|0|extra",
        "abc|name||0",
        "-2|name||0",
        "3|  ||0",
    ],
)
def test_task_from_line_rejects_malformed(line) -> None:
    assert task_from_line(line) is None


def test_split_line_handles_crlf() -> None:
    assert split_line("1|a|b|0\r\n") == ["1", "a", "b", "0"]


def test_parse_id() -> None:
    assert parse_id("12") == 12
    assert parse_id(" 4 ") == 4
    assert parse_id("0") is None
    assert parse_id("twelve") is None
    assert parse_id("1.5") is None


def test_display_lines() -> None:
    assert Task(id=1, name="A").display() == ["[1] [PENDING] A"]
    assert Task(id=2, name="B", description="note", completed=True).display() == [
        "[2] [DONE] B",
        "    Description: note",
    ]
