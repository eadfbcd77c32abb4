# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

TITLE_MAX_LENGTH = 100

_DONE_MARK = "✅"
_PENDING_MARK = "⏳"


class TaskStoreError(Exception):
    """Base class for task store failures that a caller can recover from."""


class ValidationError(TaskStoreError, ValueError):
    """Rejected input for a new task (blank or over-length title)."""


class NotFoundError(TaskStoreError, LookupError):
    """No task with the requested id exists in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__("task not found")
        self.task_id = task_id


@dataclass(slots=True, eq=False)
class Task:
    """
    One to-do record.

    `id` and `created_at` are fixed at creation. Title length and emptiness are
    enforced by TaskStore.add, not here.
    """

    id: int
    title: str
    description: str = ""
    completed: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    def toggle(self) -> None:
        self.completed = not self.completed

    def is_from_today(self, now: datetime | None = None) -> bool:
        if now is None:
            now = datetime.now()
        return (now - self.created_at) < timedelta(days=1)

    def summary(self) -> str:
        mark = _DONE_MARK if self.completed else _PENDING_MARK
        return f"{mark} {self.title}"

    def matches(self, query: str) -> bool:
        needle = query.casefold()
        return needle in self.title.casefold() or needle in self.description.casefold()

    def __repr__(self) -> str:
        return f"Task(id={self.id}, title={self.title!r}, completed={self.completed})"
