# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import Task
from .controller import TaskController


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    controller: TaskController

    # Last task removed with /rm, offered back by /undo.
    last_deleted: Task | None = None
