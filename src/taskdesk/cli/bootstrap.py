# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the AppState with a fresh TaskStore,
- performs the startup load of the tasks file.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import LoadResult, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(settings=settings, task_store=TaskStore())


def load_initial_tasks(state: AppState) -> LoadResult | None:
    """
    Startup load from settings.tasks_path.

    A missing file means "no data yet". Other failures are logged and
    reported (None is returned); the app continues with what was read.
    """
    if not getattr(state.settings, "load_on_start", True):
        return LoadResult(found=False)

    path = state.settings.tasks_path
    try:
        result = state.task_store.load_from_file(path)
    except (OSError, UnicodeDecodeError):
        logger.exception(
            "Failed to load tasks from %s; continuing with %d tasks.",
            path,
            state.task_store.count_tasks(),
        )
        return None

    logger.info("Startup load from %s: %s", path, result)
    return result
