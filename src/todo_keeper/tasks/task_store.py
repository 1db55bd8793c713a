# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from .task_models import Task, TaskOutcome

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task collection.

    Invariants:
    - task ids are pairwise distinct
    - next_id is greater than every id ever issued or hydrated, and never goes down
    - insertion order is the display order; delete does not reorder the rest

    Persistence is not handled here: see task_codec / task_api.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def add(self, description: str) -> Task:
        task = Task(id=self._next_id, description=description, completed=False)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task added id=%s next_id=%s", task.id, self._next_id)
        return task

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order (empty list when there are none)."""
        return list(self._tasks)

    def complete(self, task_id: int) -> TaskOutcome:
        """Mark a task completed. Completing an already completed task is OK."""
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Complete: task id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND
        self._tasks[idx] = replace(self._tasks[idx], completed=True)
        logger.debug("Task completed id=%s", task_id)
        return TaskOutcome.OK

    def delete(self, task_id: int) -> TaskOutcome:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Delete: task id=%s not found", task_id)
            return TaskOutcome.NOT_FOUND
        del self._tasks[idx]
        logger.debug("Task deleted id=%s", task_id)
        return TaskOutcome.OK

    def hydrate(self, tasks: Iterable[Task], max_observed_id: int | None = None) -> int:
        """
        Bulk-load previously persisted tasks (startup only).

        next_id becomes max(max_observed_id, highest loaded id) + 1 when that is larger
        than the current value. Tasks are immutable, so the store owns them as given.
        Tasks whose id is already present are skipped.

        Returns the number of tasks actually added.
        """
        seen = {t.id for t in self._tasks}
        added = 0
        highest = 0
        for task in tasks:
            highest = max(highest, task.id)
            if task.id in seen:
                logger.warning("Hydrate: duplicate task id=%s skipped", task.id)
                continue
            seen.add(task.id)
            self._tasks.append(task)
            added += 1

        # Never below an id this call just loaded.
        max_observed_id = max(highest, max_observed_id or 0)
        if max_observed_id + 1 > self._next_id:
            self._next_id = max_observed_id + 1

        logger.info("TaskStore hydrated tasks=%d next_id=%d", added, self._next_id)
        return added
