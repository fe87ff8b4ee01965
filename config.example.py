# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use a local, gitignored .env for machine-specific values.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "JOBTRACK_APP_NAME": "App display name (default: job-tracker).",
    "JOBTRACK_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage (gitignored)
    "JOBTRACK_DATA_DIR": "Local data directory for the store and log file (default: .local/job-tracker).",
    "JOBTRACK_STORAGE_BACKEND": "Key-value backend: sqlite or json (default: sqlite).",
    "JOBTRACK_STORAGE_PATH": (
        "Backend file (default: <data_dir>/store.sqlite3, or <data_dir>/store.json for json)."
    ),
    "JOBTRACK_STORAGE_KEY": "Slot key holding the application list (default: job-tracker-apps).",
    # Default view
    "JOBTRACK_DEFAULT_SORT_FIELD": "dateApplied, companyName, status or priority (default: dateApplied).",
    "JOBTRACK_DEFAULT_SORT_DIRECTION": "asc or desc (default: desc).",
}
