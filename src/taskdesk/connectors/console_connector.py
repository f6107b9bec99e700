# src/taskdesk/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

from ..cli.commands import MenuRegistry
from ..cli.commands import registry as menu_registry
from ..core.ports import Console
from ..core.state import AppState

logger = logging.getLogger(__name__)


class TerminalConsole:
    """Console port over input()/print()."""

    def ask(self, prompt: str) -> str:
        return input(prompt)

    def say(self, text: str = "") -> None:
        print(text, flush=True)

    def clear(self) -> None:
        """Clear the screen when attached to a terminal, no-op otherwise."""
        try:
            if sys.stdout.isatty():
                sys.stdout.write("\033[2J\033[H")
                sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("Screen clear failed.", exc_info=True)


def run_console_loop(
    state: AppState,
    console: Console | None = None,
    registry: MenuRegistry | None = None,
) -> None:
    console = console or TerminalConsole()
    registry = registry or menu_registry

    settings = state.settings
    title = f"{getattr(settings, 'app_name', 'taskdesk')} - personal task manager"
    pause = bool(getattr(settings, "pause_after_action", True))
    clear = bool(getattr(settings, "clear_screen", True))

    logger.info("Console started (tasks=%d).", state.task_store.count_tasks())

    while True:
        try:
            if clear:
                console.clear()
            console.say(registry.build_menu(title))
            choice = console.ask("Choose an option: ")

            try:
                reply = registry.handle(state, choice, console)
            except (EOFError, KeyboardInterrupt):
                raise
            except Exception:
                logger.exception("Menu handler crashed (choice=%r).", choice)
                reply = "Internal error while handling that option."

            if reply is None:
                logger.info("Console exit option selected.")
                break

            console.say(reply)
            if pause:
                console.ask("Press Enter to continue...")

        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            console.say()
            break

    logger.info("Console finished.")
