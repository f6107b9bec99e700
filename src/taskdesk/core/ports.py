# src/taskdesk/core/ports.py

"""
Ports (interfaces) used by the console layer.

Handlers depend on these Protocols instead of concrete classes,
so tests can swap in scripted consoles or alternative stores.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Category, Task
from ..tasks.task_store import LoadResult


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    def create(
        self,
        name: str,
        description: str,
        category: Category,
        high_priority: bool,
    ) -> Task: ...

    def find_by_category(self, category: Category) -> list[Task]: ...

    def delete_by_id(self, task_id: int) -> Task: ...

    def load_from_file(self, path: str | Path) -> LoadResult: ...

    def save_to_file(self, path: str | Path) -> int: ...


class Console(Protocol):
    """Line-oriented terminal I/O: `ask` raises EOFError when input ends."""

    def ask(self, prompt: str) -> str: ...

    def say(self, text: str = "") -> None: ...

    def clear(self) -> None: ...
