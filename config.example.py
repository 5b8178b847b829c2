# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "PLANNER_APP_NAME": "App display name (default: planner).",
    "PLANNER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "PLANNER_DATA_DIR": "Local data directory (default: .local/planner).",
    "PLANNER_STORAGE_BACKEND": "json (one file per key) or sqlite (default: json).",
    "PLANNER_JSON_DIR": "Directory for the json backend (default: <data_dir>/store).",
    "PLANNER_SQLITE_PATH": "Database for the sqlite backend (default: <data_dir>/planner.sqlite3).",
    # Calendar views
    "PLANNER_LOCALE": "Month names in the year view: pt-BR or en (default: pt-BR).",
    "PLANNER_PREVIEW_LIMIT": "Tasks previewed per day in the month view (default: 3).",
    "PLANNER_PREVIEW_WIDTH": "Max characters of each month-view preview (default: 24).",
}
