# src/todo_app/tasks/task_list.py

"""
Observable task snapshot for front ends.

The store is stateless; this container holds the last full list_all() result
and re-pulls it after every mutation it performs. Open / completed views are
plain filters over that snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskRepo
from .task_models import Task

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[tuple[Task, ...]], None]


class TaskListModel:
    def __init__(self, repo: TaskRepo, *, load: bool = True) -> None:
        self._repo = repo
        self._tasks: tuple[Task, ...] = ()
        self._listeners: list[SnapshotListener] = []
        if load:
            self.refresh()

    # ---- views ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def open_tasks(self) -> list[Task]:
        return [t for t in self._tasks if not t.is_completed]

    @property
    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.is_completed]

    def find(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- observation ----

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener called with every new snapshot. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def refresh(self) -> tuple[Task, ...]:
        self._tasks = tuple(self._repo.list_all())
        logger.debug("Snapshot refreshed: %d tasks", len(self._tasks))
        for listener in list(self._listeners):
            try:
                listener(self._tasks)
            except Exception:
                logger.exception("Snapshot listener failed.")
        return self._tasks

    # ---- mutations (always followed by a refresh) ----

    def add(self, task: Task) -> int:
        task_id = self._repo.create(task)
        self.refresh()
        return task_id

    def save(self, task: Task) -> None:
        self._repo.update(task)
        self.refresh()

    def toggle(self, task: Task) -> Task:
        """Flip the completion flag and write back the whole row."""
        flipped = task.with_completed(not task.is_completed)
        self._repo.update(flipped)
        self.refresh()
        return flipped

    def remove(self, task: Task) -> None:
        self._repo.delete(task)
        self.refresh()
