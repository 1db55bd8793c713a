# src/todo_keeper/tasks/task_codec.py

"""
Line format for the tasks file:

    <id>|<completed:0|1>|<description>

One line per task, terminated by "\\n", no header or footer. Only the first two
delimiters are structural: everything after the second one is the description.
Descriptions are written verbatim; a description containing "|" survives a
round-trip, one containing a newline does not.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .task_models import Task, TaskCodecError

logger = logging.getLogger(__name__)

DELIMITER = "|"
FLAG_DONE = "1"
FLAG_OPEN = "0"

_ID_RE = re.compile(r"[0-9]+")


def encode_task(task: Task) -> str:
    flag = FLAG_DONE if task.completed else FLAG_OPEN
    return f"{task.id}{DELIMITER}{flag}{DELIMITER}{task.description}\n"


def encode_tasks(tasks: Iterable[Task]) -> str:
    return "".join(encode_task(t) for t in tasks)


def _parse_id(raw: str) -> int | None:
    s = raw.strip()
    if not _ID_RE.fullmatch(s):
        return None
    value = int(s)
    return value if value > 0 else None


def decode_tasks(text: str, *, strict: bool = False) -> list[Task]:
    """
    Parse tasks file contents.

    Lines with fewer than two delimiters are skipped. A line whose id is not a
    positive integer is skipped too, unless strict=True, in which case
    TaskCodecError is raised and nothing is returned.
    """
    out: list[Task] = []
    for line_no, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue

        first = line.find(DELIMITER)
        second = line.find(DELIMITER, first + 1) if first != -1 else -1
        if first == -1 or second == -1:
            logger.debug("Skipping malformed line %d (missing delimiter)", line_no)
            continue

        raw_id = line[:first]
        task_id = _parse_id(raw_id)
        if task_id is None:
            if strict:
                raise TaskCodecError(line_no, raw_id)
            logger.warning("Skipping line %d: unparseable task id %r", line_no, raw_id)
            continue

        out.append(
            Task(
                id=task_id,
                completed=line[first + 1 : second] == FLAG_DONE,
                description=line[second + 1 :],
            )
        )
    return out


def max_task_id(tasks: Iterable[Task]) -> int:
    return max((t.id for t in tasks), default=0)
