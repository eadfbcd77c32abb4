# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.core.controller import TaskController
from taskpad.core.state import AppState
from taskpad.tasks.task_store import EXAMPLE_TASKS, TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        log_to_file=False,
        seed_examples=True,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    """Empty store with a deterministic clock."""
    return TaskStore(clock=clock)


@pytest.fixture()
def seeded_store(clock: FakeClock) -> TaskStore:
    """Store seeded like a fresh session (three example tasks)."""
    return TaskStore(seed=EXAMPLE_TASKS, clock=clock)


@pytest.fixture()
def controller(seeded_store: TaskStore) -> TaskController:
    return TaskController(seeded_store)


@pytest.fixture()
def state(settings: SimpleNamespace, controller: TaskController) -> AppState:
    return AppState(settings=settings, controller=controller)
