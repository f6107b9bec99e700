# tests/test_prompts.py

from __future__ import annotations

import pytest

from taskdesk.cli.prompts import ask_bool, ask_category, ask_int
from taskdesk.tasks.task_models import Category

from .fakes import ScriptedConsole


def test_ask_category_reprompts_until_valid() -> None:
    console = ScriptedConsole(["home", "", "Ocio"])

    assert ask_category(console) is Category.LEISURE
    assert len(console.prompts) == 3
    assert console.output.count(console.output[0]) == 2
    assert "Invalid category" in console.output[0]


def test_ask_bool_reprompts_until_valid() -> None:
    console = ScriptedConsole(["maybe", "True"])

    assert ask_bool(console, "High priority: ") is True
    assert console.prompts == ["High priority: ", "High priority: "]


def test_ask_int_reprompts_on_non_integer() -> None:
    console = ScriptedConsole(["abc", "4.5", " 12 "])

    assert ask_int(console, "Id: ") == 12
    assert len(console.output) == 2


def test_prompt_propagates_eof() -> None:
    console = ScriptedConsole(["nope"])

    with pytest.raises(EOFError):
        ask_bool(console, "High priority: ")
