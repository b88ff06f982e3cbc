# src/todo_app/tasks/task_form.py

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .task_list import TaskListModel
from .task_models import DEFAULT_PRIORITY, PRIORITY_CHOICES, Task

DEADLINE_FORMAT = "%d.%m.%Y %H:%M"
BLANK_TITLE_MESSAGE = "Title must not be empty"


def format_deadline(dt: datetime) -> str:
    """Render a picked date/time the way deadlines are displayed (dd.MM.yyyy HH:mm)."""
    return dt.strftime(DEADLINE_FORMAT)


def parse_deadline(text: str) -> datetime:
    return datetime.strptime(text.strip(), DEADLINE_FORMAT)


def normalize_priority(text: str) -> str:
    """Map low/medium/high (any case) to the canonical label; keep anything else as typed."""
    raw = (text or "").strip()
    if not raw:
        return DEFAULT_PRIORITY
    for choice in PRIORITY_CHOICES:
        if raw.lower() == choice.lower():
            return choice
    return raw


@dataclass
class TaskForm:
    """
    Editor for one task (new or existing).

    submit() refuses blank titles and keeps the form open by returning the
    notice text; nothing is written in that case.
    """

    title: str = ""
    description: str = ""
    priority: str = DEFAULT_PRIORITY
    deadline: str = ""
    editing: Task | None = None

    @classmethod
    def for_new(cls) -> TaskForm:
        return cls()

    @classmethod
    def for_task(cls, task: Task) -> TaskForm:
        return cls(
            title=task.title,
            description=task.description,
            priority=task.priority,
            deadline=task.deadline,
            editing=task,
        )

    @property
    def is_new(self) -> bool:
        return self.editing is None

    def validate(self) -> str | None:
        if not self.title.strip():
            return BLANK_TITLE_MESSAGE
        return None

    def to_task(self) -> Task:
        if self.editing is None:
            return Task(
                title=self.title,
                description=self.description,
                priority=self.priority,
                deadline=self.deadline,
            )
        return replace(
            self.editing,
            title=self.title,
            description=self.description,
            priority=self.priority,
            deadline=self.deadline,
        )

    def submit(self, model: TaskListModel) -> str | None:
        error = self.validate()
        if error:
            return error
        if self.editing is None:
            model.add(self.to_task())
        else:
            model.save(self.to_task())
        return None
