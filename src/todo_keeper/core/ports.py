# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

Commands depend on this Protocol rather than on TaskStore directly,
so tests can drive them with any store-like object.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task, TaskOutcome


class TaskRepo(Protocol):
    @property
    def next_id(self) -> int: ...

    def count_tasks(self) -> int: ...
    def get_task(self, task_id: int) -> Task | None: ...

    def add(self, description: str) -> Task: ...
    def list_tasks(self) -> list[Task]: ...
    def complete(self, task_id: int) -> TaskOutcome: ...
    def delete(self, task_id: int) -> TaskOutcome: ...

    # Startup only
    def hydrate(self, tasks: Iterable[Task], max_observed_id: int | None = None) -> int: ...
