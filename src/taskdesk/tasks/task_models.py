# src/taskdesk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import InvalidInputError

TRUE_TOKEN = "True"
FALSE_TOKEN = "False"


class Category(StrEnum):
    """
    Task category.

    Values are the canonical labels written to the tasks file and shown to the user.
    """

    PERSONAL = "Persona"
    WORK = "Trabajo"
    LEISURE = "Ocio"

    @classmethod
    def from_file(cls, raw: str) -> Category:
        """Exact, case-sensitive match on the canonical label."""
        return cls(raw)

    @classmethod
    def parse_input(cls, raw: str | None) -> Category:
        """
        Lenient parse for typed input.

        Accepts the label ("trabajo") or the member name ("work"), any case.
        """
        token = (raw or "").strip().lower()
        for member in cls:
            if token in (member.value.lower(), member.name.lower()):
                return member
        raise InvalidInputError(f"unknown category: {raw!r}")

    @classmethod
    def choices_hint(cls) -> str:
        return ", ".join(m.value.lower() for m in cls)


def format_bool(value: bool) -> str:
    return TRUE_TOKEN if value else FALSE_TOKEN


def parse_bool_token(raw: str) -> bool:
    """File-side boolean: only the exact tokens written by format_bool."""
    if raw == TRUE_TOKEN:
        return True
    if raw == FALSE_TOKEN:
        return False
    raise ValueError(f"not a boolean token: {raw!r}")


def parse_bool_input(raw: str | None) -> bool:
    token = (raw or "").strip().lower()
    if token == "true":
        return True
    if token == "false":
        return False
    raise InvalidInputError(f"expected 'true' or 'false', got {raw!r}")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    name: str
    description: str
    category: Category
    high_priority: bool

    @property
    def priority_label(self) -> str:
        return "Alta" if self.high_priority else "Baja"

    def __str__(self) -> str:
        return (
            f"{self.id} - {self.name} | {self.description} | "
            f"{self.category.value} | {self.priority_label}"
        )
