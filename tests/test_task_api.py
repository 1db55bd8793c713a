# tests/test_task_api.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_keeper.tasks.task_api import load_store_from_file, save_store_to_file
from todo_keeper.tasks.task_file import read_tasks_file, write_tasks_file
from todo_keeper.tasks.task_models import TaskCodecError, TaskFileError
from todo_keeper.tasks.task_store import TaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    store = TaskStore()
    assert load_store_from_file(store, tmp_path / "absent.txt") == 0
    assert store.list_tasks() == []
    assert store.next_id == 1


def test_load_sets_next_id_from_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("5|1|Buy milk\n", encoding="utf-8")

    store = TaskStore()
    assert load_store_from_file(store, path) == 1
    assert store.next_id >= 6
    assert store.add("Walk dog").id == 6


def test_load_skips_bad_lines_and_keeps_the_rest(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("1|0|a\n3|oops\nzz|1|bad id\n2|1|b\n", encoding="utf-8")

    store = TaskStore()
    assert load_store_from_file(store, path) == 2
    assert [t.description for t in store.list_tasks()] == ["a", "b"]


def test_strict_load_fails_without_touching_store(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("1|0|a\nzz|1|bad id\n", encoding="utf-8")

    store = TaskStore()
    with pytest.raises(TaskCodecError):
        load_store_from_file(store, path, strict=True)
    assert store.count_tasks() == 0
    assert store.next_id == 1


def test_save_then_load_reproduces_store(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.txt"
    store = TaskStore()
    store.add("one")
    store.add("two")
    store.add("three")
    store.complete(2)
    store.delete(3)

    assert save_store_to_file(store, path) == 2
    assert path.read_text(encoding="utf-8") == "1|0|one\n2|1|two\n"

    fresh = TaskStore()
    load_store_from_file(fresh, path)
    assert fresh.list_tasks() == store.list_tasks()
    # id 3 was deleted before saving, so it is not remembered across restarts.
    assert fresh.next_id == 3


def test_save_empty_store_writes_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("9|0|stale\n", encoding="utf-8")

    assert save_store_to_file(TaskStore(), path) == 0
    assert path.read_text(encoding="utf-8") == ""

    store = TaskStore()
    assert load_store_from_file(store, path) == 0
    assert store.next_id == 1


def test_write_failure_raises_and_leaves_no_tmp(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()

    with pytest.raises(TaskFileError):
        write_tasks_file(target, "1|0|x\n")
    assert not (tmp_path / "taken.tmp").exists()


def test_write_failure_when_parent_is_a_file(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    store = TaskStore()
    store.add("kept in memory")
    with pytest.raises(TaskFileError):
        save_store_to_file(store, blocker / "tasks.txt")
    assert store.count_tasks() == 1


def test_read_failure_raises(tmp_path: Path) -> None:
    with pytest.raises(TaskFileError):
        read_tasks_file(tmp_path)


def test_write_replaces_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    write_tasks_file(path, "1|0|long line that will disappear\n2|0|x\n")
    write_tasks_file(path, "3|1|short\n")
    assert read_tasks_file(path) == "3|1|short\n"
