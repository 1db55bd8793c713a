# src/todo_keeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task, TaskFileError
from .bootstrap import save_tasks

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

NO_TASKS = "No tasks to display."
NOT_FOUND = "Task ID not found."

_COMMAND_RE = re.compile(r"(\S+)\s?(.*)\Z", re.DOTALL)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        # Name ends at the first whitespace char; the rest is free text, kept verbatim.
        m = _COMMAND_RE.match(line[1:])
        if not m:
            return "Empty command. Use /help to list available commands."

        name = m.group(1).lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        rest = m.group(2)
        args = [rest] if rest else []

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit, /quit - Save and exit.")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    mark = "X" if task.completed else " "
    return f"{task.id}. [{mark}] {task.description}"


def _parse_task_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].strip())
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    # Descriptions are taken verbatim, empty included.
    description = args[0] if args else ""
    task = state.task_store.add(description)
    state.dirty = True
    return f"Task added (id={task.id})."


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return NO_TASKS
    lines = ["--- Current Tasks ---"]
    lines.extend(format_task(t) for t in tasks)
    return "\n".join(lines)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /done <task id>."
    if not state.task_store.complete(task_id).ok:
        return NOT_FOUND
    state.dirty = True
    return "Task marked as completed."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /delete <task id>."
    if not state.task_store.delete(task_id).ok:
        return NOT_FOUND
    state.dirty = True
    return "Task deleted."


def cmd_save(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if emit:
        emit(f"Saving to {state.tasks_file_path}...")
    try:
        n = save_tasks(state)
    except TaskFileError as e:
        logger.error("Save failed: %s", e)
        return f"Failed to save tasks: {e}"
    return f"Tasks saved ({n})."


def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    unsaved = "yes" if state.dirty else "no"
    return (
        "Status:\n"
        f"  Tasks file: {state.tasks_file_path}\n"
        f"  Tasks: {store.count_tasks()}\n"
        f"  Next id: {store.next_id}\n"
        f"  Unsaved changes: {unsaved}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.")
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls", "view"])
registry.register(
    "done", cmd_done, help_text="Mark a task completed: /done <id>.", aliases=["complete"]
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"])
registry.register("save", cmd_save, help_text="Save tasks without exiting.")
registry.register("status", cmd_status, help_text="Show tasks file, counts and next id.")
