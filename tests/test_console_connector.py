# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from todo_keeper.cli.bootstrap import create_initial_state, load_tasks
from todo_keeper.connectors.console_connector import run_console_loop


def scripted(lines: Iterable[str]):
    """input() stand-in: returns scripted lines, then raises EOFError."""
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_menu_add_view_complete_delete_then_save(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(
        state,
        read=scripted(
            [
                "1", "Buy milk",
                "1", "Walk dog",
                "3", "1",
                "4", "2",
                "2",
                "5",
            ]
        ),
    )
    out = capsys.readouterr().out

    assert "--- To-Do List Manager ---" in out
    assert "Task marked as completed." in out
    assert "Task deleted." in out
    assert "1. [X] Buy milk" in out
    assert "Tasks saved. Exiting..." in out
    assert Path(state.tasks_file_path).read_text(encoding="utf-8") == "1|1|Buy milk\n"
    assert state.dirty is False


def test_slash_commands_and_invalid_choice(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read=scripted(["/add a", "9", "2", "3", "42", "/exit"]))
    out = capsys.readouterr().out

    assert "Task added (id=1)." in out
    assert "Invalid choice. Try again." in out
    assert "1. [ ] a" in out
    assert "Task ID not found." in out
    assert Path(state.tasks_file_path).exists()


def test_view_empty_store_reports_no_tasks(state, capsys: pytest.CaptureFixture[str]) -> None:
    run_console_loop(state, read=scripted(["2", "5"]))
    out = capsys.readouterr().out
    assert "No tasks to display." in out
    assert Path(state.tasks_file_path).read_text(encoding="utf-8") == ""


def test_eof_exits_without_saving(state) -> None:
    run_console_loop(state, read=scripted(["1", "unsaved"]))
    assert state.dirty is True
    assert not Path(state.tasks_file_path).exists()


def test_failed_exit_save_can_stay_or_quit(state, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    state.tasks_file_path = blocker / "tasks.txt"

    run_console_loop(state, read=scripted(["1", "x", "5", "n", "5", "y"]))
    out = capsys.readouterr().out

    assert out.count("Failed to save tasks:") == 2
    assert "Tasks saved. Exiting..." not in out
    assert state.task_store.count_tasks() == 1


def test_handler_crash_does_not_end_loop(state, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    def boom(task_id: int):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "complete", boom)
    run_console_loop(state, read=scripted(["3", "1", "/add still alive", "5"]))
    out = capsys.readouterr().out

    assert "Internal error while handling a command." in out
    assert "Task added (id=1)." in out


def test_session_survives_restart(settings, state) -> None:
    run_console_loop(state, read=scripted(["1", "first", "1", "second", "4", "2", "5"]))

    restarted = create_initial_state(settings=settings)
    assert load_tasks(restarted) == 1
    assert restarted.task_store.add("third").id == 2


def test_slash_and_menu_add_keep_description_spacing(state) -> None:
    run_console_loop(state, read=scripted(["  /add padded  ", "1", "  menu padded  ", "/quit"]))

    assert [t.description for t in state.task_store.list_tasks()] == ["padded  ", "  menu padded  "]
    assert Path(state.tasks_file_path).read_text(encoding="utf-8") == (
        "1|0|padded  \n2|0|  menu padded  \n"
    )
