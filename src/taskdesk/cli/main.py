# src/taskdesk/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the tasks file,
then runs the console menu in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_initial_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    if load_initial_tasks(state) is None:
        print(f"Warning: could not read {settings.tasks_path}; see the log for details.")

    try:
        run_console_loop(state)
    finally:
        # Saving is explicit (menu option 4); nothing is flushed on exit.
        logger.info("Bye.")


if __name__ == "__main__":
    main()
