# src/todo_app/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_form import BLANK_TITLE_MESSAGE, TaskForm, normalize_priority
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        # Only the command name is split off; the rest is passed verbatim so titles keep their spacing.
        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        arg_text = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, arg_text)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting / parsing helpers ----


def format_task(task: Task) -> str:
    mark = "x" if task.is_completed else " "
    details = task.priority or "-"
    if task.deadline:
        details += f", due {task.deadline}"
    return f"#{task.id} [{mark}] {task.title} ({details})"


def format_task_details(task: Task) -> str:
    lines = [format_task(task)]
    if task.description.strip():
        lines.append(f"  Description: {task.description}")
    lines.append(f"  Priority: {task.priority}")
    if task.deadline.strip():
        lines.append(f"  Deadline: {task.deadline}")
    return "\n".join(lines)


def _split_fields(text: str) -> list[str]:
    """'title words | description | High | 01.02.2026 10:00' -> stripped fields."""
    return [p.strip() for p in text.split(FIELD_SEPARATOR)]


def _fill_form(form: TaskForm, fields: list[str]) -> None:
    form.title = fields[0] if fields else ""
    if len(fields) > 1:
        form.description = fields[1]
    if len(fields) > 2:
        form.priority = normalize_priority(fields[2])
    if len(fields) > 3:
        form.deadline = fields[3]


def _lookup(state: AppState, raw_id: str) -> Task | str:
    try:
        task_id = int(raw_id)
    except ValueError:
        return f"Invalid task id: {raw_id}"
    task = state.tasks.find(task_id)
    if task is None:
        return f"No task with id {task_id}."
    return task


def _render_list(header: str, tasks: list[Task], empty: str) -> str:
    if not tasks:
        return f"{header}\n  {empty}"
    return "\n".join([header, *(f"  {format_task(t)}" for t in tasks)])


# ---- commands ----


def cmd_help(state: AppState, arg_text: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, arg_text: str) -> str:
    model = state.tasks
    model.refresh()
    return (
        "Status:\n"
        f"  Database: {state.task_store.db_path}\n"
        f"  Open: {len(model.open_tasks)}\n"
        f"  Completed: {len(model.completed_tasks)}"
    )


def cmd_list(state: AppState, arg_text: str) -> str:
    state.tasks.refresh()
    return _render_list("Open tasks:", state.tasks.open_tasks, "No tasks.")


def cmd_done(state: AppState, arg_text: str) -> str:
    state.tasks.refresh()
    return _render_list("Completed tasks:", state.tasks.completed_tasks, "No completed tasks.")


def cmd_show(state: AppState, arg_text: str) -> str:
    args = arg_text.split()
    if not args:
        return "Usage: /show <id>"
    found = _lookup(state, args[0])
    if isinstance(found, str):
        return found
    return format_task_details(found)


def cmd_add(state: AppState, arg_text: str) -> str:
    """
    /add <title> [| description [| priority [| deadline]]]
    """
    form = TaskForm.for_new()
    _fill_form(form, _split_fields(arg_text))
    error = form.validate()
    if error:
        return error
    task_id = state.tasks.add(form.to_task())
    logger.info("Task created via console id=%s", task_id)
    created = state.tasks.find(task_id)
    return f"Added: {format_task(created)}" if created else f"Added #{task_id}."


def cmd_edit(state: AppState, arg_text: str) -> str:
    """
    /edit <id> <title> [| description [| priority [| deadline]]]

    Fields after the title are optional; omitted ones keep their current value.
    """
    args = arg_text.split(maxsplit=1)
    if not args:
        return "Usage: /edit <id> <title> [| description [| priority [| deadline]]]"
    found = _lookup(state, args[0])
    if isinstance(found, str):
        return found

    form = TaskForm.for_task(found)
    _fill_form(form, _split_fields(args[1] if len(args) > 1 else ""))
    try:
        error = form.submit(state.tasks)
    except ValueError:
        return BLANK_TITLE_MESSAGE
    if error:
        return error
    updated = state.tasks.find(found.id)
    return f"Saved: {format_task(updated)}" if updated else "Saved."


def cmd_toggle(state: AppState, arg_text: str) -> str:
    args = arg_text.split()
    if not args:
        return "Usage: /toggle <id>"
    found = _lookup(state, args[0])
    if isinstance(found, str):
        return found
    try:
        flipped = state.tasks.toggle(found)
    except ValueError:
        return BLANK_TITLE_MESSAGE
    return f"{'Completed' if flipped.is_completed else 'Reopened'}: {format_task(flipped)}"


def cmd_delete(state: AppState, arg_text: str) -> str:
    args = arg_text.split()
    if not args:
        return "Usage: /delete <id>"
    found = _lookup(state, args[0])
    if isinstance(found, str):
        return found
    state.tasks.remove(found)
    return f"Deleted #{found.id}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show database path and task counts.")
registry.register("list", cmd_list, help_text="List open tasks (newest first).", aliases=["ls", "open"])
registry.register("done", cmd_done, help_text="List completed tasks.", aliases=["completed"])
registry.register("show", cmd_show, help_text="Show one task: /show <id>.")
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add <title> [| description [| priority [| deadline]]].",
    aliases=["new"],
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit <id> <title> [| description [| priority [| deadline]]].",
)
registry.register("toggle", cmd_toggle, help_text="Mark a task done / not done: /toggle <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
