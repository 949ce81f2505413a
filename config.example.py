# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "REVIEW_TODO_APP_NAME": "Window title (default: review-todo).",
    "REVIEW_TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "REVIEW_TODO_LOG_TO_CONSOLE": "Also log to stderr (true/false, default false: the TUI owns the screen).",
    # Paths (gitignored)
    "REVIEW_TODO_DATA_DIR": "Local data directory for the database and log file (default: .local/review_todo).",
    "REVIEW_TODO_DB_PATH": "TaskStore SQLite path (default: <data_dir>/todos.sqlite3).",
    # Behaviour
    "REVIEW_TODO_RETENTION_DAYS": "Finished todos older than this are pruned on exit (default: 7).",
    "REVIEW_TODO_CONTENT_WIDTH": "Width of the content column in the list (default: 30).",
    "REVIEW_TODO_CHAR_LIMIT": "Max characters accepted by the input box (default: 280).",
}
