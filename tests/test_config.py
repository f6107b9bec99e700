# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskdesk.config import Settings

_VARS = (
    "TASKDESK_APP_NAME",
    "TASKDESK_LOG_LEVEL",
    "TASKDESK_DATA_DIR",
    "TASKDESK_TASKS_FILE",
    "TASKDESK_LOAD_ON_START",
    "TASKDESK_PAUSE_AFTER_ACTION",
    "TASKDESK_CLEAR_SCREEN",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "taskdesk"
    assert s.log_level == "WARNING"
    assert s.tasks_path == Path("tareas.txt")
    assert s.data_dir == Path(".local/taskdesk")
    assert s.load_on_start is True
    assert s.pause_after_action is True
    assert s.clear_screen is True


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDESK_TASKS_FILE", str(tmp_path / "my.txt"))
    monkeypatch.setenv("TASKDESK_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKDESK_PAUSE_AFTER_ACTION", "no")
    monkeypatch.setenv("TASKDESK_CLEAR_SCREEN", "0")
    monkeypatch.setenv("TASKDESK_LOAD_ON_START", "Yes")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "my.txt"
    assert s.log_level == "DEBUG"
    assert s.pause_after_action is False
    assert s.clear_screen is False
    assert s.load_on_start is True


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKDESK_TASKS_FILE", "  ")
    monkeypatch.setenv("TASKDESK_APP_NAME", "")

    s = Settings.from_env()

    assert s.tasks_path == Path("tareas.txt")
    assert s.app_name == "taskdesk"
