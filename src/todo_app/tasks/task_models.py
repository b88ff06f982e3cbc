# src/todo_app/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Priority(StrEnum):
    """
    Conventional priority labels offered by the editor.

    The store keeps priority as free text and never checks it against this enum.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


PRIORITY_CHOICES: tuple[str, ...] = tuple(p.value for p in Priority)
DEFAULT_PRIORITY: str = Priority.MEDIUM.value


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do record.

    id == 0 means "not yet persisted"; the store assigns real ids on create.
    """

    title: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY
    deadline: str = ""
    is_completed: bool = False
    id: int = 0

    @property
    def is_draft(self) -> bool:
        return self.id == 0

    def with_completed(self, completed: bool) -> Task:
        return replace(self, is_completed=bool(completed))
