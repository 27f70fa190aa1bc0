"""In-memory operations on the task collection.

Tasks are matched by exact id; when a tampered file holds duplicate ids the
first one in collection order wins, except for deletion which drops them all.
"""

from __future__ import annotations

from todo_tracker.models import Task


def next_task_id(tasks: list[Task]) -> int:
    """Highest existing id plus one; ids of deleted tasks are never reused."""

    return max((task.id for task in tasks), default=0) + 1


def add_task(tasks: list[Task], description: str) -> Task:
    task = Task(id=next_task_id(tasks), description=description)
    tasks.append(task)
    return task


def find_task(tasks: list[Task], task_id: int) -> Task | None:
    for task in tasks:
        if task.id == task_id:
            return task
    return None


def edit_task(tasks: list[Task], task_id: int, description: str) -> Task | None:
    task = find_task(tasks, task_id)
    if task is not None:
        task.description = description
    return task


def complete_task(tasks: list[Task], task_id: int) -> Task | None:
    task = find_task(tasks, task_id)
    if task is not None:
        task.completed = True
    return task


def delete_task(tasks: list[Task], task_id: int) -> bool:
    """Remove every task with ``task_id`` in place; True if anything was removed."""

    initial_len = len(tasks)
    tasks[:] = [task for task in tasks if task.id != task_id]
    return len(tasks) < initial_len
