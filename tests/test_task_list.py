# tests/test_task_list.py

from __future__ import annotations

from todo_app.tasks.task_list import TaskListModel
from todo_app.tasks.task_models import Task
from todo_app.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def test_model_loads_snapshot_on_creation() -> None:
    repo = FakeTaskRepo([Task(title="a"), Task(title="b", is_completed=True)])
    model = TaskListModel(repo)

    assert [t.title for t in model.tasks] == ["b", "a"]
    assert [t.title for t in model.open_tasks] == ["a"]
    assert [t.title for t in model.completed_tasks] == ["b"]


def test_every_mutation_refreshes_snapshot() -> None:
    repo = FakeTaskRepo()
    model = TaskListModel(repo)

    task_id = model.add(Task(title="new"))
    assert model.find(task_id) is not None

    model.save(Task(id=task_id, title="renamed"))
    assert model.find(task_id).title == "renamed"

    model.remove(Task(id=task_id, title="renamed"))
    assert model.tasks == ()

    assert repo.calls == [
        "list_all",
        "create",
        "list_all",
        "update",
        "list_all",
        "delete",
        "list_all",
    ]


def test_toggle_writes_back_whole_row_and_moves_views() -> None:
    repo = FakeTaskRepo([Task(title="walk dog", description="park", priority="High")])
    model = TaskListModel(repo)
    (task,) = model.open_tasks

    flipped = model.toggle(task)

    assert flipped.is_completed is True
    assert model.open_tasks == []
    assert model.completed_tasks == [flipped]
    assert repo.rows[task.id] == Task(
        id=task.id, title="walk dog", description="park", priority="High", is_completed=True
    )

    model.toggle(flipped)
    assert [t.id for t in model.open_tasks] == [task.id]


def test_subscribers_receive_new_snapshots() -> None:
    model = TaskListModel(FakeTaskRepo())
    seen: list[int] = []

    unsubscribe = model.subscribe(lambda snapshot: seen.append(len(snapshot)))
    model.add(Task(title="one"))
    model.add(Task(title="two"))
    unsubscribe()
    model.add(Task(title="three"))

    assert seen == [1, 2]


def test_failing_subscriber_does_not_break_others() -> None:
    model = TaskListModel(FakeTaskRepo())
    seen: list[int] = []

    def boom(_snapshot) -> None:
        raise RuntimeError("listener bug")

    model.subscribe(boom)
    model.subscribe(lambda snapshot: seen.append(len(snapshot)))
    model.add(Task(title="still works"))

    assert seen == [1]


def test_model_over_real_store_sees_outside_writes_only_after_refresh(store: TaskStore) -> None:
    model = TaskListModel(store)
    store.create(Task(title="written directly"))

    assert model.tasks == ()
    model.refresh()
    assert [t.title for t in model.tasks] == ["written directly"]


def test_lazy_model_does_not_touch_repo() -> None:
    repo = FakeTaskRepo([Task(title="x")])
    model = TaskListModel(repo, load=False)
    assert model.tasks == ()
    assert repo.calls == []
