# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the tasks file,
then hands the terminal to the console menu. Saving happens on the
explicit exit action inside the loop, never implicitly here.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state, load_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_models import TaskCodecError, TaskFileError

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_file_enabled else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        load_tasks(state)
    except (TaskCodecError, TaskFileError) as e:
        # The file is left untouched so it can be fixed by hand.
        logger.error("Failed to load tasks from %s: %s", state.tasks_file_path, e)
        print(f"Cannot load tasks: {e}", file=sys.stderr)
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
