# src/taskpad/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from .task_models import TITLE_MAX_LENGTH, NotFoundError, Task, ValidationError

logger = logging.getLogger(__name__)

EXAMPLE_TASKS: tuple[tuple[str, str], ...] = (
    ("Estudiar MVC", "Revisar conceptos de Modelo Vista Controlador"),
    ("Hacer ejercicio", "Rutina de 30 minutos de cardio"),
    ("Completar proyecto", "Terminar la evidencia de Android Studio"),
)


class TaskStore:
    """
    In-memory task store.

    The store is the only mutator of its tasks:
    - tasks are kept in insertion order, which is also the display order
    - ids come from an instance counter that starts at 1 and is never reset,
      so ids of deleted tasks are never handed out again

    Lookups are linear scans over the list.
    """

    def __init__(
        self,
        *,
        seed: Iterable[tuple[str, str]] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        self._clock = clock
        for title, description in seed:
            self.add(title, description)
        logger.info("TaskStore ready total=%s", self.total_count())

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    def _find(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    @staticmethod
    def _clean_title(title: str) -> str:
        clean = (title or "").strip()
        if not clean:
            raise ValidationError("title cannot be empty")
        if len(clean) > TITLE_MAX_LENGTH:
            raise ValidationError(f"title too long (max {TITLE_MAX_LENGTH} characters)")
        return clean

    # ---- mutations ----

    def add(self, title: str, description: str = "") -> Task:
        clean_title = self._clean_title(title)
        task = Task(
            id=self._allocate_id(),
            title=clean_title,
            description=(description or "").strip(),
            completed=False,
            created_at=self._clock(),
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def toggle_completed(self, task_id: int) -> Task:
        task = self._find(task_id)
        task.toggle()
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: int) -> Task:
        task = self._find(task_id)
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task.id)
        return task

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        removed = before - len(self._tasks)
        assert self.completed_count() == 0
        logger.debug("Cleared completed tasks removed=%s", removed)
        return removed

    # ---- queries ----

    def get_all(self) -> tuple[Task, ...]:
        """Current tasks in insertion order. Re-query after every mutation."""
        return tuple(self._tasks)

    def get_by_id(self, task_id: int) -> Task | None:
        try:
            return self._find(task_id)
        except NotFoundError:
            return None

    def search(self, query: str) -> list[Task]:
        """
        Case-insensitive substring search over title and description.
        A blank query returns every task.
        """
        if not query or not query.strip():
            return list(self._tasks)
        return [t for t in self._tasks if t.matches(query)]

    def list_completed(self) -> list[Task]:
        return [t for t in self._tasks if t.completed]

    def list_pending(self) -> list[Task]:
        return [t for t in self._tasks if not t.completed]

    def most_recent(self) -> Task | None:
        if not self._tasks:
            return None
        # max() keeps the first of equal timestamps; reversed() makes the later insert win.
        return max(reversed(self._tasks), key=lambda t: t.created_at)

    # ---- statistics ----

    def total_count(self) -> int:
        return len(self._tasks)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def pending_count(self) -> int:
        return sum(1 for t in self._tasks if not t.completed)

    def is_empty(self) -> bool:
        return self.total_count() == 0

    def stats_line(self) -> str:
        return (
            f"Total: {self.total_count()} | "
            f"Completed: {self.completed_count()} | "
            f"Pending: {self.pending_count()}"
        )
