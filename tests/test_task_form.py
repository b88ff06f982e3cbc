# tests/test_task_form.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_app.tasks.task_form import (
    BLANK_TITLE_MESSAGE,
    TaskForm,
    format_deadline,
    normalize_priority,
    parse_deadline,
)
from todo_app.tasks.task_list import TaskListModel
from todo_app.tasks.task_models import DEFAULT_PRIORITY, PRIORITY_CHOICES, Task

from .fakes import FakeTaskRepo


def test_new_form_defaults() -> None:
    form = TaskForm.for_new()
    assert form.is_new
    assert form.priority == DEFAULT_PRIORITY == "Medium"
    assert PRIORITY_CHOICES == ("Low", "Medium", "High")


def test_blank_title_keeps_form_open_and_writes_nothing() -> None:
    repo = FakeTaskRepo()
    model = TaskListModel(repo)
    form = TaskForm(title="   ", description="something")

    assert form.submit(model) == BLANK_TITLE_MESSAGE
    assert repo.rows == {}
    assert "create" not in repo.calls


def test_submit_new_creates_draft() -> None:
    repo = FakeTaskRepo()
    model = TaskListModel(repo)
    form = TaskForm(title="Buy milk", priority="Low")

    assert form.submit(model) is None
    (task,) = model.tasks
    assert task.title == "Buy milk"
    assert task.priority == "Low"
    assert task.is_completed is False


def test_submit_edit_preserves_id_and_completion() -> None:
    repo = FakeTaskRepo([Task(title="old", is_completed=True)])
    model = TaskListModel(repo)
    (task,) = model.tasks

    form = TaskForm.for_task(task)
    assert form.title == "old"
    form.title = "new"
    form.deadline = "24.12.2026 18:00"

    assert form.submit(model) is None
    (saved,) = model.tasks
    assert saved.id == task.id
    assert saved.title == "new"
    assert saved.deadline == "24.12.2026 18:00"
    assert saved.is_completed is True


def test_deadline_format_round_trip() -> None:
    dt = datetime(2026, 3, 7, 9, 5)
    assert format_deadline(dt) == "07.03.2026 09:05"
    assert parse_deadline(" 07.03.2026 09:05 ") == dt


def test_parse_deadline_rejects_other_formats() -> None:
    with pytest.raises(ValueError):
        parse_deadline("2026-03-07 09:05")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("low", "Low"), ("HIGH", "High"), (" Medium ", "Medium"), ("", "Medium"), ("urgent", "urgent")],
)
def test_normalize_priority(raw: str, expected: str) -> None:
    assert normalize_priority(raw) == expected
