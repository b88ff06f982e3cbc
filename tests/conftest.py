# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_app.core.state import AppState
from todo_app.tasks.provisioning import default_template_path
from todo_app.tasks.task_list import TaskListModel
from todo_app.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=data_dir,
        db_path=data_dir / "Todo.db",
        template_path=default_template_path(),
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    """Real SQLite store seeded from the bundled template."""
    return TaskStore(settings.db_path, template_path=settings.template_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store, tasks=TaskListModel(store))
