# src/taskdesk/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for task store failures."""


class TaskNotFoundError(TaskStoreError, KeyError):
    """No task with the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"No task with id {self.task_id}."


class TaskParseError(TaskStoreError, ValueError):
    """A flat-file line has the right shape but a field could not be decoded."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class InvalidInputError(ValueError):
    """User-typed value rejected by a parser; the prompt asks again."""
