# tests/test_console.py

from __future__ import annotations

from collections.abc import Iterator

from todo_app.connectors.console_connector import run_console_loop


def _feed(lines: list[str]):
    it: Iterator[str] = iter(lines)

    def read_line(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def test_plain_text_is_quick_add_and_exit_stops(state, capsys) -> None:
    run_console_loop(state, read_line=_feed(["Water plants", "", "/list", "/exit", "/add never"]))

    titles = [t.title for t in state.task_store.list_all()]
    assert titles == ["Water plants"]

    out = capsys.readouterr().out
    assert "Added: #1 [ ] Water plants (Medium)" in out
    assert "Open tasks:" in out


def test_eof_ends_loop(state) -> None:
    run_console_loop(state, read_line=_feed(["/add one"]))
    assert state.task_store.count_tasks() == 1


def test_handler_crash_is_reported(state, capsys, monkeypatch) -> None:
    def broken_list_all():
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(state.task_store, "list_all", broken_list_all)
    run_console_loop(state, read_line=_feed(["/list"]))

    assert "Internal error while handling a command." in capsys.readouterr().out
