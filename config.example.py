# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening the README.
"""

ENV_VARS = {
    # App / logging
    "CHECKLIST_APP_NAME": "App display name (default: checklist).",
    "CHECKLIST_LOG_LEVEL": "Console logging level (default: WARNING).",
    "CHECKLIST_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/checklist.log (true/false, default: true).",
    # Storage
    "CHECKLIST_STORAGE_BACKEND": "sqlite (default) or memory (nothing survives the session).",
    "CHECKLIST_DATA_DIR": "Local data directory (default: .local/checklist).",
    "CHECKLIST_STORAGE_PATH": "SQLite key-value file (default: <data_dir>/checklist.sqlite3).",
}
