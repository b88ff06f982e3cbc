# src/todo_app/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskListModel
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskStore
    tasks: TaskListModel
