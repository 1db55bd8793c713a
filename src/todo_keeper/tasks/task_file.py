# src/todo_keeper/tasks/task_file.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path

from .task_models import TaskFileError

logger = logging.getLogger(__name__)


def read_tasks_file(path: str | Path) -> str:
    """Return the tasks file contents; a missing file reads as ""."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.info("Tasks file %s not found, starting empty.", path)
        return ""
    except OSError as e:
        raise TaskFileError(f"Cannot read tasks file {path}: {e}") from e


def write_tasks_file(path: str | Path, text: str) -> None:
    """
    Overwrite the tasks file with `text`.

    Writes a sibling .tmp file first and replaces the target, so a failed write
    never leaves a truncated tasks file behind.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            tmp.unlink()
        raise TaskFileError(f"Cannot write tasks file {path}: {e}") from e
