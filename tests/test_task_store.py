# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskpad.tasks.task_models import NotFoundError, Task, ValidationError
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeClock


def _invariant_holds(store: TaskStore) -> bool:
    return store.completed_count() + store.pending_count() == store.total_count()


def test_add_assigns_sequential_ids_and_trims(store: TaskStore, clock: FakeClock) -> None:
    first = store.add("  Write report  ", "  by Friday ")
    second = store.add("Call mom")

    assert first.id == 1
    assert second.id == 2
    assert first.title == "Write report"
    assert first.description == "by Friday"
    assert second.description == ""
    assert first.completed is False
    assert first.created_at == datetime(2024, 5, 1, 9, 0, 0)
    assert store.total_count() == 2
    assert [t.id for t in store.get_all()] == [1, 2]


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_add_rejects_blank_title(store: TaskStore, title: str) -> None:
    store.add("keep me")

    with pytest.raises(ValidationError, match="title cannot be empty"):
        store.add(title)

    assert store.total_count() == 1
    # a rejected add does not consume an id
    assert store.add("next").id == 2


def test_add_title_length_limit(store: TaskStore) -> None:
    ok = store.add("x" * 100)
    assert len(ok.title) == 100

    with pytest.raises(ValidationError, match=r"title too long \(max 100 characters\)"):
        store.add("y" * 101)

    assert store.total_count() == 1


def test_length_is_checked_after_trimming(store: TaskStore) -> None:
    task = store.add("   " + "z" * 100 + "   ")
    assert task.title == "z" * 100


def test_validation_error_is_value_error(store: TaskStore) -> None:
    with pytest.raises(ValueError):
        store.add("")


def test_toggle_twice_restores_flag_and_keeps_identity(seeded_store: TaskStore) -> None:
    task = seeded_store.get_by_id(2)
    assert task is not None
    before = (task.id, task.created_at, task.title, task.description, task.completed)

    assert seeded_store.toggle_completed(2).completed is True
    assert seeded_store.completed_count() == 1
    assert seeded_store.toggle_completed(2).completed is False

    after = (task.id, task.created_at, task.title, task.description, task.completed)
    assert after == before


def test_toggle_unknown_id_raises(seeded_store: TaskStore) -> None:
    with pytest.raises(NotFoundError) as exc_info:
        seeded_store.toggle_completed(42)
    assert exc_info.value.task_id == 42
    assert str(exc_info.value) == "task not found"


def test_delete_returns_removed_task(seeded_store: TaskStore) -> None:
    removed = seeded_store.delete(1)

    assert removed.title == "Estudiar MVC"
    assert seeded_store.get_by_id(1) is None
    assert seeded_store.total_count() == 2
    assert [t.id for t in seeded_store.get_all()] == [2, 3]


def test_delete_unknown_id_leaves_store_unchanged(seeded_store: TaskStore) -> None:
    with pytest.raises(NotFoundError):
        seeded_store.delete(999)
    assert seeded_store.total_count() == 3


def test_ids_are_never_reused(store: TaskStore) -> None:
    store.add("a")
    b = store.add("b")
    store.delete(b.id)
    store.toggle_completed(1)
    store.clear_completed()

    assert store.is_empty()
    assert store.add("c").id == 3


def test_get_by_id_missing_returns_none(store: TaskStore) -> None:
    assert store.get_by_id(1) is None


def test_get_all_is_a_read_only_view(seeded_store: TaskStore) -> None:
    view = seeded_store.get_all()
    assert isinstance(view, tuple)

    seeded_store.add("later")
    assert len(view) == 3
    assert len(seeded_store.get_all()) == 4


def test_search(seeded_store: TaskStore) -> None:
    seeded_store.add("Buy milk", "whole, not skim")

    assert [t.id for t in seeded_store.search("")] == [1, 2, 3, 4]
    assert [t.id for t in seeded_store.search("   ")] == [1, 2, 3, 4]
    assert seeded_store.search("XYZ-NOT-PRESENT") == []
    # title match, case-insensitive
    assert [t.id for t in seeded_store.search("mvc")] == [1]
    # description match
    assert [t.id for t in seeded_store.search("CARDIO")] == [2]
    # substring across several tasks keeps store order
    assert [t.id for t in seeded_store.search("o")] == [1, 2, 3, 4]
    assert [t.id for t in seeded_store.search("SKIM")] == [4]


def test_clear_completed_removes_exactly_completed(seeded_store: TaskStore) -> None:
    seeded_store.add("d")
    seeded_store.toggle_completed(1)
    seeded_store.toggle_completed(3)

    assert seeded_store.clear_completed() == 2
    assert [t.id for t in seeded_store.get_all()] == [2, 4]
    assert seeded_store.completed_count() == 0
    assert seeded_store.clear_completed() == 0
    assert seeded_store.total_count() == 2


def test_counts_invariant_over_sequence(store: TaskStore) -> None:
    assert store.is_empty()
    assert _invariant_holds(store)

    for title in ("a", "b", "c", "d"):
        store.add(title)
        assert _invariant_holds(store)

    store.toggle_completed(2)
    store.toggle_completed(4)
    assert (store.completed_count(), store.pending_count()) == (2, 2)
    assert _invariant_holds(store)

    store.delete(2)
    assert _invariant_holds(store)

    store.clear_completed()
    assert _invariant_holds(store)
    assert store.total_count() == 2
    assert not store.is_empty()


def test_filtered_views_and_stats_line(seeded_store: TaskStore) -> None:
    seeded_store.toggle_completed(2)

    assert [t.id for t in seeded_store.list_completed()] == [2]
    assert [t.id for t in seeded_store.list_pending()] == [1, 3]
    assert seeded_store.stats_line() == "Total: 3 | Completed: 1 | Pending: 2"


def test_most_recent(clock: FakeClock) -> None:
    store = TaskStore(clock=clock)
    assert store.most_recent() is None

    store.add("old")
    newest = store.add("new")
    assert store.most_recent() is newest


def test_most_recent_prefers_later_insert_on_equal_timestamps() -> None:
    store = TaskStore(clock=FakeClock(step=timedelta(0)))
    store.add("first")
    second = store.add("second")
    assert store.most_recent() is second


def test_stores_are_independent() -> None:
    a = TaskStore()
    b = TaskStore()
    a.add("only in a")

    assert b.is_empty()
    assert b.add("b task").id == 1


def test_task_helpers() -> None:
    created = datetime(2024, 5, 1, 12, 0, 0)
    task = Task(id=7, title="Read book", description="Chapter 3", created_at=created)

    assert task.summary() == "⏳ Read book"
    task.toggle()
    assert task.summary() == "✅ Read book"

    assert task.matches("BOOK")
    assert task.matches("chapter")
    assert not task.matches("movie")

    assert task.is_from_today(created + timedelta(hours=23))
    assert not task.is_from_today(created + timedelta(days=1, minutes=1))
