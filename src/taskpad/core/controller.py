# src/taskpad/core/controller.py

"""
Task controller: the layer between a front-end (console, tests) and the store.

Every mutation returns an OperationResult instead of raising, so callers never
need to catch store exceptions. Change listeners run only after a mutation
that actually changed the store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.task_models import NotFoundError, Task, ValidationError
from .ports import TaskRepo
from .results import Error, Info, OperationResult, Success

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class TaskController:
    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo
        self._listeners: list[ChangeListener] = []

    # ---- change notification ----

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_changed(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Change listener failed.")

    # ---- mutations ----

    def add_task(self, title: str, description: str = "") -> OperationResult:
        try:
            task = self._repo.add(title, description)
        except ValidationError as e:
            logger.debug("add rejected: %s", e)
            return Error(str(e))
        self._notify_changed()
        return Success(f"task added: {task.title}", task)

    def toggle_completed(self, task_id: int) -> OperationResult:
        try:
            task = self._repo.toggle_completed(task_id)
        except NotFoundError as e:
            logger.debug("toggle rejected id=%s", task_id)
            return Error(str(e))
        state = "completed" if task.completed else "pending"
        self._notify_changed()
        return Success(f"task marked as {state}", task)

    def delete_task(self, task_id: int) -> OperationResult:
        try:
            task = self._repo.delete(task_id)
        except NotFoundError as e:
            logger.debug("delete rejected id=%s", task_id)
            return Error(str(e))
        self._notify_changed()
        return Success(f"task deleted: {task.title}", task)

    def restore(self, task: Task) -> OperationResult:
        """
        Re-add a deleted task's title and description.

        This is not a true undo: the restored task gets a new id and a new
        creation time, and its completion flag starts over as pending.
        """
        return self.add_task(task.title, task.description)

    def clear_completed(self) -> OperationResult:
        removed = self._repo.clear_completed()
        if removed == 0:
            return Info("no completed tasks to clear")
        self._notify_changed()
        noun = "task" if removed == 1 else "tasks"
        return Success(f"{removed} completed {noun} cleared")

    # ---- read-through queries ----

    def list_tasks(self) -> tuple[Task, ...]:
        return self._repo.get_all()

    def task_details(self, task_id: int) -> Task | None:
        return self._repo.get_by_id(task_id)

    def search(self, query: str) -> list[Task]:
        return self._repo.search(query)

    def completed_tasks(self) -> list[Task]:
        return self._repo.list_completed()

    def pending_tasks(self) -> list[Task]:
        return self._repo.list_pending()

    def has_tasks(self) -> bool:
        return not self._repo.is_empty()

    def stats_line(self) -> str:
        return self._repo.stats_line()
