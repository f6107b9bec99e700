# src/taskdesk/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Console
from ..core.state import AppState
from ..tasks.errors import TaskNotFoundError
from .prompts import ask_bool, ask_category, ask_int, ask_text

MenuHandler = Callable[[AppState, Console], str]

logger = logging.getLogger(__name__)

EXIT_KEY = "0"


class MenuRegistry:
    """Numbered menu: option key -> handler returning the text to show the user."""

    def __init__(self) -> None:
        self._handlers: dict[str, MenuHandler] = {}
        self._labels: dict[str, str] = {}

    def register(self, key: str, handler: MenuHandler, label: str) -> None:
        key = key.strip()
        if key == EXIT_KEY:
            raise ValueError(f"option {EXIT_KEY!r} is reserved for exit")
        self._handlers[key] = handler
        self._labels[key] = label

    def handle(self, state: AppState, choice: str, console: Console) -> str | None:
        """
        Dispatch one menu choice.
        Returns a reply string, or None for the exit option.
        """
        key = choice.strip()
        if key == EXIT_KEY:
            return None

        handler = self._handlers.get(key)
        if not handler:
            return "Invalid option."

        return handler(state, console)

    def build_menu(self, title: str) -> str:
        lines = [title]
        for key, label in self._labels.items():
            lines.append(f"{key}. {label}")
        lines.append(f"{EXIT_KEY}. Exit")
        return "\n".join(lines)


registry = MenuRegistry()


def cmd_create(state: AppState, console: Console) -> str:
    name = ask_text(console, "Task name: ")
    description = ask_text(console, "Task description: ")
    category = ask_category(console)
    high_priority = ask_bool(console, "High priority (true/false): ")

    task = state.task_store.create(name, description, category, high_priority)
    return f"Task created (id={task.id})."


def cmd_find(state: AppState, console: Console) -> str:
    category = ask_category(console, "Category to search for: ")
    tasks = state.task_store.find_by_category(category)

    lines = [f"Tasks of category {category.value}:"]
    if not tasks:
        lines.append("(no tasks)")
    lines.extend(str(t) for t in tasks)
    return "\n".join(lines)


def cmd_delete(state: AppState, console: Console) -> str:
    task_id = ask_int(console, "Id of the task to delete: ")
    try:
        state.task_store.delete_by_id(task_id)
    except TaskNotFoundError as e:
        return str(e)
    return f"Task {task_id} deleted."


def cmd_export(state: AppState, console: Console) -> str:
    path = state.settings.tasks_path
    try:
        written = state.task_store.save_to_file(path)
    except OSError as e:
        logger.exception("Export to %s failed.", path)
        return f"Could not export tasks to {path}: {e}"
    return f"Tasks exported to {path} ({written})."


def cmd_import(state: AppState, console: Console) -> str:
    path = state.settings.tasks_path
    try:
        result = state.task_store.load_from_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.exception("Import from %s failed.", path)
        return f"Could not import tasks from {path}: {e}"
    if not result.found:
        return "The tasks file does not exist."
    return f"Tasks imported: {result.loaded} (skipped {result.skipped})."


registry.register("1", cmd_create, "Create task")
registry.register("2", cmd_find, "Find tasks by category")
registry.register("3", cmd_delete, "Delete task")
registry.register("4", cmd_export, "Export tasks")
registry.register("5", cmd_import, "Import tasks")
