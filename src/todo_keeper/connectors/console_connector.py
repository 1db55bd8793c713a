# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.bootstrap import save_tasks
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import TaskFileError

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

MENU = (
    "\n--- To-Do List Manager ---\n"
    "1. Add Task\n"
    "2. View Tasks\n"
    "3. Mark Task as Completed\n"
    "4. Delete Task\n"
    "5. Save & Exit\n"
    "(or type /help for commands)"
)

EXIT_WORDS = ("5", "/exit", "/quit")

# Menu number -> (command, prompt for its argument or None).
_MENU_COMMANDS: dict[str, tuple[str, str | None]] = {
    "1": ("add", "Enter task description: "),
    "2": ("list", None),
    "3": ("done", "Enter task ID to mark as completed: "),
    "4": ("delete", "Enter task ID to delete: "),
}


def _dispatch(state: AppState, line: str) -> str | None:
    try:
        return command_registry.handle(state, line, emit=print)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def _menu_to_command(choice: str, read: InputFn) -> str | None:
    entry = _MENU_COMMANDS.get(choice)
    if entry is None:
        return None
    name, prompt = entry
    if prompt is None:
        return f"/{name}"
    arg = read(prompt)
    return f"/{name} {arg}" if arg else f"/{name}"


def _save_and_confirm_exit(state: AppState, read: InputFn) -> bool:
    """Save before exiting. Returns False if the user chose to stay after a failed save."""
    try:
        save_tasks(state)
    except TaskFileError as e:
        logger.error("Save on exit failed: %s", e)
        print(f"Failed to save tasks: {e}")
    else:
        print("Tasks saved. Exiting...")
        return True

    answer = read("Quit without saving? [y/N]: ").strip().lower()
    if answer in ("y", "yes"):
        logger.warning("Exiting with unsaved changes after a failed save.")
        return True
    return False


def run_console_loop(state: AppState, read: InputFn | None = None) -> None:
    """
    Numbered-menu REPL over the task store.

    Exit paths:
    - "5", /exit, /quit: save, then exit
    - EOF / Ctrl+C: exit without saving
    """
    if read is None:
        read = input
    logger.info("Console connector started (file=%s).", state.tasks_file_path)

    while True:
        print(MENU)
        try:
            raw = read("Choose an option: ")
            user_input = raw.strip()
            if user_input.lower() in EXIT_WORDS:
                if _save_and_confirm_exit(state, read):
                    break
                continue

            # Slash commands get the raw line so descriptions keep trailing spaces.
            line = raw.lstrip() if user_input.startswith("/") else _menu_to_command(user_input, read)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if line is None:
            print("Invalid choice. Try again.")
            continue

        reply = _dispatch(state, line)
        if reply is not None:
            print(reply)

    if state.dirty:
        logger.warning("Console finished with unsaved changes; they are discarded.")
    logger.info("Console connector finished.")
