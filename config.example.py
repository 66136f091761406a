# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Session
    "TODO_OWNER_ID": "Signed-in user id; tasks are fetched and created for this owner.",
    # Sync policy
    "TODO_RELOAD_AFTER_ADD": "Re-fetch the whole task list after each create (true/false, default: false).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory, holds todo.log (default: .local/todo).",
    "TODO_SEED_PATH": "Optional JSON list of task documents to seed the in-memory store.",
}
