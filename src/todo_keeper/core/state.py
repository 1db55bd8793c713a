# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    tasks_file_path: Path

    # True once the store diverges from what is on disk.
    dirty: bool = False
