# src/todo_app/core/ports.py

"""
Ports (interfaces) used by the front end.

The task list model depends on this Protocol instead of the concrete SQLite store,
which keeps tests free to use an in-memory repo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    def list_all(self) -> list[Task]: ...
    def create(self, task: Task) -> int: ...
    def update(self, task: Task) -> None: ...
    def delete(self, task: Task) -> None: ...
