# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the in-memory TaskStore (seeded with example tasks unless disabled),
- wires the controller into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskController
from ..core.state import AppState
from ..tasks.task_store import EXAMPLE_TASKS, TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    seed = EXAMPLE_TASKS if getattr(settings, "seed_examples", True) else ()
    store = TaskStore(seed=seed)
    logger.debug("Session store created seeded=%s", bool(seed))

    return AppState(settings=settings, controller=TaskController(store))
