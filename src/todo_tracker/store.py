"""JSON file persistence for the task collection."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

from todo_tracker.models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORE_FILE = "todos.json"


class StoreStage(str, Enum):
    """Step of a load or save that failed."""

    OPEN = "open"
    READ = "read"
    PARSE = "parse"
    SERIALIZE = "serialize"
    OPEN_FOR_WRITE = "open_for_write"
    WRITE = "write"


_STAGE_MESSAGES = {
    StoreStage.OPEN: "Failed to open todo file",
    StoreStage.READ: "Failed to read from todo file",
    StoreStage.PARSE: "Failed to parse todo file JSON",
    StoreStage.SERIALIZE: "Failed to serialize todos to JSON",
    StoreStage.OPEN_FOR_WRITE: "Failed to open or create todo file for writing",
    StoreStage.WRITE: "Failed to write to todo file",
}


class StoreError(RuntimeError):
    """Fatal storage failure tagged with the step that failed."""

    def __init__(self, stage: StoreStage, path: Path, detail: object) -> None:
        super().__init__(f"{_STAGE_MESSAGES[stage]} {str(path)!r}: {detail}")
        self.stage = stage
        self.path = path


def load_tasks(path: Path) -> list[Task]:
    """Load the persisted collection.

    A missing or zero-length file is an empty collection; anything else that
    is not a valid task array raises :class:`StoreError`.
    """

    try:
        handle = path.open("r", encoding="utf-8")
    except FileNotFoundError:
        logger.debug("Todo file %s not found, starting with an empty list", path)
        return []
    except OSError as error:
        raise StoreError(StoreStage.OPEN, path, error) from error

    with handle:
        try:
            contents = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            raise StoreError(StoreStage.READ, path, error) from error

    if not contents:
        return []

    try:
        payload = json.loads(contents)
        if not isinstance(payload, list):
            raise TypeError("expected a JSON array of tasks")
        tasks = [Task.from_dict(entry) for entry in payload]
    except (TypeError, ValueError, RecursionError) as error:
        raise StoreError(StoreStage.PARSE, path, error) from error

    logger.debug("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def save_tasks(path: Path, tasks: list[Task]) -> None:
    """Overwrite the todo file with the pretty-printed collection."""

    try:
        text = json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=2)
        # encode before opening: the open truncates the previous contents
        data = text.encode("utf-8")
    except (TypeError, ValueError) as error:
        raise StoreError(StoreStage.SERIALIZE, path, error) from error

    try:
        handle = path.open("wb")
    except OSError as error:
        raise StoreError(StoreStage.OPEN_FOR_WRITE, path, error) from error

    # close() flushes, so it belongs to the write step
    try:
        with handle:
            handle.write(data)
    except OSError as error:
        raise StoreError(StoreStage.WRITE, path, error) from error

    logger.debug("Saved %d tasks to %s", len(tasks), path)
