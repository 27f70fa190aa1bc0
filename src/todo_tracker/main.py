"""CLI entrypoint for the task tracker."""

from collections.abc import Callable
from pathlib import Path

import rich_click as click

from todo_tracker import __version__
from todo_tracker.config import LOG_LEVELS, Settings
from todo_tracker.controllers import (
    AddTaskCommand,
    CommandResult,
    EditTaskCommand,
    ListTasksCommand,
    TaskIdCommand,
    TodoCliController,
)
from todo_tracker.logging_setup import setup_logging
from todo_tracker.store import StoreError

click.rich_click.USE_MARKDOWN = True
CONTROLLER = TodoCliController()

_FILE_OPTION = click.option(
    "--file",
    "store_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Todo JSON file. Defaults to TODO_TRACKER_FILE or todos.json.",
)


@click.group()
@click.version_option(version=__version__, prog_name="todo")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Diagnostic log level on stderr. Defaults to TODO_TRACKER_LOG_LEVEL or WARNING.",
)
def todo(log_level: str | None) -> None:
    """A simple to-do list manager."""

    settings = Settings.from_env(log_level=log_level)
    try:
        settings.validate()
    except ValueError as error:
        raise click.ClickException(str(error)) from error
    setup_logging(settings.log_level_value)


@todo.command("add")
@click.argument("task")
@_FILE_OPTION
def add(task: str, store_path: Path | None) -> None:
    """Add a new to-do item."""

    _run(lambda: CONTROLLER.add(AddTaskCommand(store_path=store_path, description=task)))


@todo.command("list")
@_FILE_OPTION
def list_(store_path: Path | None) -> None:
    """List all to-do items."""

    _run(lambda: CONTROLLER.list_tasks(ListTasksCommand(store_path=store_path)))


@todo.command("edit")
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@click.option("-n", "--new-task", required=True, help="The new task description.")
@_FILE_OPTION
def edit(task_id: int, new_task: str, store_path: Path | None) -> None:
    """Edit an existing to-do item's description."""

    _run(
        lambda: CONTROLLER.edit(
            EditTaskCommand(store_path=store_path, task_id=task_id, description=new_task),
        ),
    )


@todo.command("complete")
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@_FILE_OPTION
def complete(task_id: int, store_path: Path | None) -> None:
    """Mark a to-do item as complete."""

    _run(lambda: CONTROLLER.complete(TaskIdCommand(store_path=store_path, task_id=task_id)))


@todo.command("delete")
@click.argument("task_id", metavar="ID", type=click.IntRange(min=0))
@_FILE_OPTION
def delete(task_id: int, store_path: Path | None) -> None:
    """Delete a to-do item."""

    _run(lambda: CONTROLLER.delete(TaskIdCommand(store_path=store_path, task_id=task_id)))


def _run(action: Callable[[], CommandResult]) -> None:
    try:
        result = action()
    except StoreError as error:
        raise click.ClickException(str(error)) from error
    _emit_lines(result.lines)
    _emit_lines(result.errors, err=True)


def _emit_lines(lines: list[str], *, err: bool = False) -> None:
    for line in lines:
        click.echo(line, err=err)


if __name__ == "__main__":  # pragma: no cover
    todo()
