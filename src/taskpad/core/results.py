# src/taskpad/core/results.py

"""
Outcome of a controller-level mutation.

A result is exactly one of:
- Success: the change was applied (carries the affected task where relevant),
- Error: the change was rejected; the store is untouched,
- Info: nothing to do (e.g. clearing when no task is completed).

Callers branch on the class (structural `match`) or on `kind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_models import Task


class ResultKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Success:
    message: str
    task: Task | None = None

    @property
    def kind(self) -> ResultKind:
        return ResultKind.SUCCESS


@dataclass(frozen=True, slots=True)
class Error:
    message: str
    task: Task | None = None

    @property
    def kind(self) -> ResultKind:
        return ResultKind.ERROR


@dataclass(frozen=True, slots=True)
class Info:
    message: str
    task: Task | None = None

    @property
    def kind(self) -> ResultKind:
        return ResultKind.INFO


OperationResult = Success | Error | Info
