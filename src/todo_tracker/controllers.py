"""Controllers for task tracker CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from todo_tracker.config import Settings
from todo_tracker.models import Task
from todo_tracker.store import load_tasks, save_tasks
from todo_tracker.tasks import add_task, complete_task, delete_task, edit_task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AddTaskCommand:
    """CLI inputs for add command."""

    store_path: Path | None
    description: str


@dataclass(slots=True)
class ListTasksCommand:
    """CLI inputs for list command."""

    store_path: Path | None


@dataclass(slots=True)
class EditTaskCommand:
    """CLI inputs for edit command."""

    store_path: Path | None
    task_id: int
    description: str


@dataclass(slots=True)
class TaskIdCommand:
    """CLI inputs for commands addressing one task by id (complete, delete)."""

    store_path: Path | None
    task_id: int


@dataclass(slots=True)
class CommandResult:
    """Lines for stdout, not-found notices for stderr, and whether the file was rewritten."""

    lines: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    persisted: bool = False


class TodoCliController:
    """Runs one command per call: load, apply, save."""

    def add(self, command: AddTaskCommand) -> CommandResult:
        return self._mutate(
            command.store_path,
            lambda tasks: _added(add_task(tasks, command.description)),
        )

    def list_tasks(self, command: ListTasksCommand) -> CommandResult:
        settings = Settings.from_env(store_path=command.store_path)
        tasks = load_tasks(settings.store_path)
        if not tasks:
            return CommandResult(lines=["No to-dos yet! Add one with the 'add' command."])

        lines = ["--- Your To-Do List ---"]
        for task in tasks:
            status = "[x]" if task.completed else "[ ]"
            lines.append(f"{status} {task.id}: {task.description}")
        return CommandResult(lines=lines)

    def edit(self, command: EditTaskCommand) -> CommandResult:
        def apply(tasks: list[Task]) -> CommandResult:
            task = edit_task(tasks, command.task_id, command.description)
            if task is None:
                return _not_found(command.task_id)
            return CommandResult(lines=[f'📝 Edited to-do {task.id}: "{task.description}"'])

        return self._mutate(command.store_path, apply)

    def complete(self, command: TaskIdCommand) -> CommandResult:
        def apply(tasks: list[Task]) -> CommandResult:
            task = complete_task(tasks, command.task_id)
            if task is None:
                return _not_found(command.task_id)
            return CommandResult(lines=[f'🎉 Completed to-do {task.id}: "{task.description}"'])

        return self._mutate(command.store_path, apply)

    def delete(self, command: TaskIdCommand) -> CommandResult:
        def apply(tasks: list[Task]) -> CommandResult:
            if not delete_task(tasks, command.task_id):
                return _not_found(command.task_id)
            return CommandResult(lines=[f"🗑️ Deleted to-do with ID {command.task_id}."])

        return self._mutate(command.store_path, apply)

    def _mutate(
        self,
        store_path: Path | None,
        apply: Callable[[list[Task]], CommandResult],
    ) -> CommandResult:
        # Not-found still saves: the write is a no-op rewrite of the same data.
        settings = Settings.from_env(store_path=store_path)
        tasks = load_tasks(settings.store_path)
        result = apply(tasks)
        save_tasks(settings.store_path, tasks)
        result.persisted = True
        return result


def _added(task: Task) -> CommandResult:
    return CommandResult(lines=[f'✅ Added new to-do: "{task.description}" (ID: {task.id})'])


def _not_found(task_id: int) -> CommandResult:
    logger.debug("No task with id=%d", task_id)
    return CommandResult(errors=[f"Error: To-do with ID {task_id} not found."])
