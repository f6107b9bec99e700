# src/taskdesk/cli/prompts.py

"""Prompt helpers: ask until the typed value parses. EOFError propagates."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ..core.ports import Console
from ..tasks.errors import InvalidInputError
from ..tasks.task_models import Category, parse_bool_input

T = TypeVar("T")

logger = logging.getLogger(__name__)


def ask_until_valid(
    console: Console,
    prompt: str,
    parse: Callable[[str], T],
    error_message: str,
) -> T:
    while True:
        raw = console.ask(prompt)
        try:
            return parse(raw)
        except InvalidInputError as e:
            logger.debug("Rejected input for %r: %s", prompt, e)
            console.say(error_message)


def parse_int_input(raw: str | None) -> int:
    try:
        return int((raw or "").strip())
    except ValueError:
        raise InvalidInputError(f"not an integer: {raw!r}") from None


def ask_text(console: Console, prompt: str) -> str:
    return console.ask(prompt).strip()


def ask_category(console: Console, prompt: str | None = None) -> Category:
    hint = Category.choices_hint()
    return ask_until_valid(
        console,
        prompt or f"Category ({hint}): ",
        Category.parse_input,
        f"Invalid category, it must be one of: {hint}. Try again.",
    )


def ask_bool(console: Console, prompt: str) -> bool:
    return ask_until_valid(
        console,
        prompt,
        parse_bool_input,
        "Invalid value. Please type 'true' or 'false'.",
    )


def ask_int(console: Console, prompt: str) -> int:
    return ask_until_valid(
        console,
        prompt,
        parse_int_input,
        "Invalid number. Try again.",
    )
