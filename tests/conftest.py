"""Shared test fixtures."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_tracker.models import Task
from todo_tracker.store import save_tasks


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of the tests."""
    monkeypatch.delenv("TODO_TRACKER_FILE", raising=False)
    monkeypatch.delenv("TODO_TRACKER_LOG_LEVEL", raising=False)


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def seeded_store(store_path: Path) -> Path:
    """Todo file holding tasks 1..3 with task 2 completed."""
    save_tasks(
        store_path,
        [
            Task(id=1, description="buy milk"),
            Task(id=2, description="walk the dog", completed=True),
            Task(id=3, description="write report"),
        ],
    )
    return store_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers bound to a finished CliRunner's stderr."""
    yield
    logger = logging.getLogger("todo_tracker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
