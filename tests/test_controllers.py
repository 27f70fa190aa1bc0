from __future__ import annotations

from pathlib import Path

import allure

from todo_tracker.controllers import (
    AddTaskCommand,
    EditTaskCommand,
    ListTasksCommand,
    TaskIdCommand,
    TodoCliController,
)

pytestmark = [
    allure.epic("CLI"),
    allure.feature("Commands"),
]


def test_list_does_not_persist(seeded_store: Path) -> None:
    result = TodoCliController().list_tasks(ListTasksCommand(store_path=seeded_store))

    assert result.persisted is False
    assert result.lines[0] == "--- Your To-Do List ---"
    assert result.errors == []


def test_list_on_missing_file_does_not_persist(store_path: Path) -> None:
    result = TodoCliController().list_tasks(ListTasksCommand(store_path=store_path))

    assert result.persisted is False
    assert not store_path.exists()


def test_mutations_persist_even_when_id_is_missing(store_path: Path) -> None:
    controller = TodoCliController()

    results = [
        controller.add(AddTaskCommand(store_path=store_path, description="buy milk")),
        controller.edit(EditTaskCommand(store_path=store_path, task_id=9, description="x")),
        controller.complete(TaskIdCommand(store_path=store_path, task_id=9)),
        controller.delete(TaskIdCommand(store_path=store_path, task_id=9)),
        controller.delete(TaskIdCommand(store_path=store_path, task_id=1)),
    ]

    assert [result.persisted for result in results] == [True] * 5
    assert [len(result.errors) for result in results] == [0, 1, 1, 1, 0]
    assert store_path.read_text("utf-8") == "[]"
