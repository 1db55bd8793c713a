# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/todo_keeper/config.py.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-keeper).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_FILE_ENABLED": "Also write full logs to <data_dir>/todo.log (true/false, default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_TASKS_FILE": "Tasks file path (default: <data_dir>/tasks.txt).",
    # Loading policy
    "TODO_STRICT_IDS": (
        "Abort startup on a tasks-file line with an unparseable id instead of skipping it "
        "(true/false, default: false)."
    ),
}
