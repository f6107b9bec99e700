# tests/test_task_models.py

from __future__ import annotations

import pytest

from taskdesk.tasks.errors import InvalidInputError
from taskdesk.tasks.task_models import Category, Task, parse_bool_input


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("persona", Category.PERSONAL),
        ("  TRABAJO ", Category.WORK),
        ("Ocio", Category.LEISURE),
        ("work", Category.WORK),
        ("Personal", Category.PERSONAL),
        ("LEISURE", Category.LEISURE),
    ],
)
def test_category_input_is_case_insensitive(raw: str, expected: Category) -> None:
    assert Category.parse_input(raw) is expected


@pytest.mark.parametrize("raw", ["", "home", "1", None])
def test_category_input_rejects_unknown(raw) -> None:
    with pytest.raises(InvalidInputError):
        Category.parse_input(raw)


def test_category_file_parse_is_exact() -> None:
    assert Category.from_file("Trabajo") is Category.WORK
    with pytest.raises(ValueError):
        Category.from_file("trabajo")


def test_bool_input() -> None:
    assert parse_bool_input(" TRUE ") is True
    assert parse_bool_input("false") is False
    with pytest.raises(InvalidInputError):
        parse_bool_input("yes")


def test_task_display_line() -> None:
    high = Task(id=2, name="Finish report", description="Q3", category=Category.WORK, high_priority=True)
    low = Task(id=1, name="Buy milk", description="", category=Category.PERSONAL, high_priority=False)

    assert str(high) == "2 - Finish report | Q3 | Trabajo | Alta"
    assert str(low) == "1 - Buy milk |  | Persona | Baja"


def test_task_is_immutable() -> None:
    task = Task(id=1, name="a", description="", category=Category.LEISURE, high_priority=False)
    with pytest.raises(AttributeError):
        task.name = "b"  # type: ignore[misc]
