# tests/test_manager.py

from __future__ import annotations

import pytest

from mark.errors import MalformedLineError, ValidationError
from mark.manager import NO_PENDING_MESSAGE, TaskManager


def test_add_to_empty_store_then_list(manager: TaskManager) -> None:
    manager.add_task(2, "hello world")
    assert manager.format_listing() == "1. hello world [2]"


def test_add_places_task_by_priority(manager: TaskManager, seed) -> None:
    seed("1 a", "3 b")
    manager.add_task(2, "c")
    assert manager.format_listing() == "1. a [1]\n2. c [2]\n3. b [3]"
    assert manager.pending.path.read_text() == "1 a\n2 c\n3 b"


def test_added_task_listed_exactly_once(manager: TaskManager, seed) -> None:
    seed("0 first", "9 last")
    manager.add_task(4, "middle")
    texts = [t.text for t in manager.load_pending()]
    assert texts.count("middle") == 1
    assert texts.index("middle") == 1


def test_add_negative_priority_leaves_file_untouched(manager: TaskManager, seed) -> None:
    seed("3 b", "1 a")
    before = manager.pending.path.read_bytes()
    with pytest.raises(ValidationError, match="Priority cannot be negative"):
        manager.add_task(-1, "nope")
    assert manager.pending.path.read_bytes() == before


def test_add_multiline_text_is_rejected(manager: TaskManager) -> None:
    with pytest.raises(ValidationError, match="Nothing added"):
        manager.add_task(1, "two\nlines")
    assert manager.load_pending() == []


@pytest.mark.parametrize("index", [0, -1, 3])
def test_delete_out_of_range_leaves_file_untouched(manager: TaskManager, seed, index: int) -> None:
    seed("1 a", "2 b")
    before = manager.pending.path.read_bytes()
    with pytest.raises(ValidationError, match="does not exist"):
        manager.delete_task(index)
    assert manager.pending.path.read_bytes() == before


def test_delete_removes_one_and_keeps_order(manager: TaskManager, seed) -> None:
    seed("3 c", "1 a", "2 b", "4 d")
    removed = manager.delete_task(2)
    assert removed.text == "b"
    assert [t.text for t in manager.load_pending()] == ["a", "c", "d"]


def test_complete_moves_text_only(manager: TaskManager, seed) -> None:
    seed("7 water plants")
    manager.completed.append("earlier")
    manager.complete_task(1)
    assert manager.load_pending() == []
    assert manager.load_completed() == ["earlier", "water plants"]
    assert manager.completed.path.read_text() == "earlier\nwater plants\n"


def test_complete_uses_sorted_index(manager: TaskManager, seed) -> None:
    seed("5 later", "1 now")
    task = manager.complete_task(1)
    assert task.text == "now"
    assert manager.format_listing() == "1. later [5]"


@pytest.mark.parametrize("index", [0, 2])
def test_complete_out_of_range(manager: TaskManager, seed, index: int) -> None:
    seed("1 a")
    with pytest.raises(ValidationError, match="no incomplete item"):
        manager.complete_task(index)
    assert manager.load_completed() == []
    assert manager.pending.path.read_text() == "1 a"


def test_update_with_empty_text_keeps_text(manager: TaskManager, seed) -> None:
    seed("1 x")
    manager.update_task(1, 5, "")
    assert manager.pending.path.read_text() == "5 x"


def test_update_replaces_text_and_resorts(manager: TaskManager, seed) -> None:
    seed("1 a", "2 b")
    manager.update_task(1, 9, "z")
    assert manager.format_listing() == "1. b [2]\n2. z [9]"


def test_update_negative_priority_aborts(manager: TaskManager, seed) -> None:
    seed("1 a")
    with pytest.raises(ValidationError, match="Nothing updated"):
        manager.update_task(1, -2, "b")
    assert manager.pending.path.read_text() == "1 a"


@pytest.mark.parametrize("index", [0, 2])
def test_update_out_of_range(manager: TaskManager, seed, index: int) -> None:
    seed("1 a")
    with pytest.raises(ValidationError, match="no item with index"):
        manager.update_task(index, 3, "b")
    assert manager.pending.path.read_text() == "1 a"


def test_listing_is_idempotent(manager: TaskManager, seed) -> None:
    seed("2 b", "1 a")
    assert manager.format_listing() == manager.format_listing()


def test_empty_listing_message(manager: TaskManager) -> None:
    assert manager.format_listing() == NO_PENDING_MESSAGE


def test_report(manager: TaskManager, seed) -> None:
    seed("2 b", "1 a")
    manager.completed.append("done thing")
    assert manager.get_report() == (
        "Pending : 2\n"
        "1. a [1]\n"
        "2. b [2]\n"
        "\n"
        "Completed : 1\n"
        "1. done thing"
    )


def test_summary(manager: TaskManager, seed) -> None:
    seed("1 a")
    manager.completed.append("old")
    summary = manager.get_summary()
    assert summary.pending_count == 1
    assert summary.completed == ["old"]


def test_malformed_line_names_file_and_line(manager: TaskManager, seed) -> None:
    seed("1 a", "oops")
    with pytest.raises(MalformedLineError) as excinfo:
        manager.load_pending()
    assert excinfo.value.lineno == 2
    assert excinfo.value.path == manager.pending.path


def test_missing_files_are_created(tmp_path) -> None:
    m = TaskManager(tmp_path / "fresh")
    assert m.load_pending() == []
    assert m.load_completed() == []
    assert (tmp_path / "fresh" / "task.txt").exists()
    assert (tmp_path / "fresh" / "completed.txt").exists()
