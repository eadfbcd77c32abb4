# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on this Protocol instead of the concrete TaskStore,
which keeps the store swappable and lets tests pass a fake.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    # Mutations (raise ValidationError / NotFoundError)
    def add(self, title: str, description: str = "") -> Task: ...
    def toggle_completed(self, task_id: int) -> Task: ...
    def delete(self, task_id: int) -> Task: ...
    def clear_completed(self) -> int: ...

    # Queries
    def get_all(self) -> tuple[Task, ...]: ...
    def get_by_id(self, task_id: int) -> Task | None: ...
    def search(self, query: str) -> list[Task]: ...
    def list_completed(self) -> list[Task]: ...
    def list_pending(self) -> list[Task]: ...

    # Statistics
    def total_count(self) -> int: ...
    def completed_count(self) -> int: ...
    def pending_count(self) -> int: ...
    def is_empty(self) -> bool: ...
    def stats_line(self) -> str: ...
