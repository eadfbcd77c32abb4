"""taskpad: a single-session, in-memory task list."""

__version__ = "0.1.0"
