# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the TaskStore and hydrates it from the tasks file,
- saves the store back on request.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import load_store_from_file, save_store_to_file
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings (empty store, nothing loaded yet).

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_file_path=settings.tasks_file_path,
    )


def load_tasks(state: AppState) -> int:
    """
    Hydrate state.task_store from disk.

    Raises TaskFileError / TaskCodecError (strict mode); the caller decides whether to abort.
    """
    strict = bool(getattr(state.settings, "strict_ids", False))
    n = load_store_from_file(state.task_store, state.tasks_file_path, strict=strict)
    state.dirty = False
    return n


def save_tasks(state: AppState) -> int:
    """Write the store to disk. Raises TaskFileError; `dirty` stays set on failure."""
    n = save_store_to_file(state.task_store, state.tasks_file_path)
    state.dirty = False
    return n
