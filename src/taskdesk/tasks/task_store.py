# src/taskdesk/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import TaskNotFoundError, TaskParseError
from .task_models import Category, Task, format_bool, parse_bool_token

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
FIELD_COUNT = 5


@dataclass(frozen=True, slots=True)
class LoadResult:
    found: bool
    loaded: int = 0
    skipped: int = 0


class TaskStore:
    """
    In-memory task store backed by a flat ';'-separated text file.

    Line format: id;name;description;category;highPriority

    - no escaping: a ';' inside a text field breaks that line on the next load
    - tasks keep insertion order (file order for loaded tasks)
    - lookups are linear scans
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    # ---- line codec ----

    @staticmethod
    def _task_to_line(task: Task) -> str:
        return FIELD_SEPARATOR.join(
            (
                str(task.id),
                task.name,
                task.description,
                task.category.value,
                format_bool(task.high_priority),
            )
        )

    @staticmethod
    def _line_to_task(line: str) -> Task | None:
        """
        Decode one line.

        Returns None for a wrong field count (silently ignored by the loader).
        Raises TaskParseError when the shape is right but a field is invalid.
        """
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) != FIELD_COUNT:
            return None

        raw_id, name, description, raw_category, raw_priority = parts
        try:
            task_id = int(raw_id)
        except ValueError:
            raise TaskParseError(line, "invalid id") from None
        if task_id <= 0:
            raise TaskParseError(line, "id must be positive")

        try:
            category = Category.from_file(raw_category)
        except ValueError:
            raise TaskParseError(line, "unknown category") from None

        try:
            high_priority = parse_bool_token(raw_priority)
        except ValueError:
            raise TaskParseError(line, "invalid priority") from None

        return Task(
            id=task_id,
            name=name,
            description=description,
            category=category,
            high_priority=high_priority,
        )

    # ---- public API ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def count_tasks(self) -> int:
        return len(self._tasks)

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def create(
        self,
        name: str,
        description: str,
        category: Category,
        high_priority: bool,
    ) -> Task:
        max_id = max((t.id for t in self._tasks), default=0)
        task_id = max(self._next_id, max_id + 1)

        task = Task(
            id=task_id,
            name=name,
            description=description,
            category=category,
            high_priority=bool(high_priority),
        )
        self._tasks.append(task)
        self._next_id = task_id + 1
        logger.debug("Task created id=%s category=%s", task_id, category.value)
        return task

    def find_by_category(self, category: Category) -> list[Task]:
        return [t for t in self._tasks if t.category == category]

    def delete_by_id(self, task_id: int) -> Task:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                logger.debug("Task deleted id=%s", task_id)
                return task
        raise TaskNotFoundError(task_id)

    def load_from_file(self, path: str | Path) -> LoadResult:
        """
        Append tasks read from `path`.

        A missing file leaves the store untouched. Lines with the wrong field
        count, undecodable fields, or an id already in the store are skipped.
        The allocator follows the last accepted id (last id + 1).
        Other OSErrors propagate.
        """
        path = Path(path)
        try:
            fh = path.open("r", encoding="utf-8")
        except FileNotFoundError:
            logger.info("Tasks file not found: %s", path)
            return LoadResult(found=False)

        loaded = 0
        skipped = 0
        with fh:
            for lineno, raw in enumerate(fh, start=1):
                line = raw.rstrip("\r\n")
                if not line:
                    continue
                try:
                    task = self._line_to_task(line)
                except TaskParseError as e:
                    logger.warning("Skipping %s:%d (%s)", path, lineno, e.reason)
                    skipped += 1
                    continue

                if task is None:
                    logger.debug("Skipping %s:%d (field count)", path, lineno)
                    skipped += 1
                    continue

                if self.get_task(task.id) is not None:
                    logger.warning("Skipping %s:%d (duplicate id %s)", path, lineno, task.id)
                    skipped += 1
                    continue

                self._tasks.append(task)
                self._next_id = task.id + 1
                loaded += 1

        logger.info(
            "Loaded tasks from %s: loaded=%d skipped=%d next_id=%d",
            path,
            loaded,
            skipped,
            self._next_id,
        )
        return LoadResult(found=True, loaded=loaded, skipped=skipped)

    def save_to_file(self, path: str | Path) -> int:
        """Overwrite `path` with every task, one line each, in store order."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            for task in self._tasks:
                fh.write(self._task_to_line(task) + "\n")
        logger.info("Saved %d tasks to %s", len(self._tasks), path)
        return len(self._tasks)
