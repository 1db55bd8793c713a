# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskOutcome(StrEnum):
    """
    Result of an id-addressed store operation (complete/delete).

    NOT_FOUND is an ordinary outcome (the user typed a wrong id), not an error.
    """

    OK = "ok"
    NOT_FOUND = "not_found"

    @property
    def ok(self) -> bool:
        return self is TaskOutcome.OK


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    completed: bool = False


class TaskCodecError(ValueError):
    """Raised by strict decoding when a line carries an unparseable id."""

    def __init__(self, line_no: int, raw_id: str) -> None:
        super().__init__(f"Unparseable task id {raw_id!r} on line {line_no}")
        self.line_no = line_no
        self.raw_id = raw_id


class TaskFileError(RuntimeError):
    """Tasks file could not be read or written."""
