"""Domain model for persisted to-do tasks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """One to-do entry.

    ``description`` is stored under the ``task`` key of the storage file.
    """

    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "task": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: object) -> Task:
        """Build a task from one decoded storage entry, rejecting schema mismatches."""

        if not isinstance(raw, dict):
            raise TypeError("task entry must be an object")
        missing = [key for key in ("id", "task", "completed") if key not in raw]
        if missing:
            raise ValueError(f"task entry missing required fields: {', '.join(missing)}")

        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
            raise ValueError(f"task.id must be a non-negative integer, got {task_id!r}")
        description = raw["task"]
        if not isinstance(description, str):
            raise TypeError(f"task.task must be a string (id={task_id})")
        completed = raw["completed"]
        if not isinstance(completed, bool):
            raise TypeError(f"task.completed must be a boolean (id={task_id})")
        return cls(id=task_id, description=description, completed=completed)
