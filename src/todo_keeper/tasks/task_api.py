# src/todo_keeper/tasks/task_api.py

from __future__ import annotations

import logging
from pathlib import Path

from .task_codec import decode_tasks, encode_tasks, max_task_id
from .task_file import read_tasks_file, write_tasks_file
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def load_store_from_file(store: TaskStore, path: str | Path, *, strict: bool = False) -> int:
    """
    Hydrate `store` from the tasks file at `path`.

    Decoding happens before anything touches the store, so a strict-mode
    TaskCodecError (or a TaskFileError) leaves the store as it was.
    Returns the number of tasks loaded.
    """
    tasks = decode_tasks(read_tasks_file(path), strict=strict)
    loaded = store.hydrate(tasks, max_task_id(tasks))
    logger.info("Loaded %d tasks from %s (next_id=%d)", loaded, path, store.next_id)
    return loaded


def save_store_to_file(store: TaskStore, path: str | Path) -> int:
    """Overwrite the tasks file with the store contents. Returns the number of tasks written."""
    tasks = store.list_tasks()
    write_tasks_file(path, encode_tasks(tasks))
    logger.info("Saved %d tasks to %s", len(tasks), path)
    return len(tasks)
