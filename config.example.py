# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name used in the prompt (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPAD_LOG_TO_FILE": "Write a DEBUG log to <data_dir>/taskpad.log (true/false, default: true).",
    # Session
    "TASKPAD_SEED_EXAMPLES": "Start each session with three example tasks (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory for logs (default: .local/taskpad).",
}
