# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from mark.manager import TaskManager


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep MARK_* variables from the developer's shell out of the tests."""
    for name in ("MARK_DIR", "MARK_PENDING_FILE", "MARK_COMPLETED_FILE", "MARK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def manager(tmp_path: Path) -> TaskManager:
    m = TaskManager(tmp_path)
    m.ensure_files()
    return m


@pytest.fixture()
def seed(manager: TaskManager):
    """Write raw lines straight into the pending file."""

    def _seed(*lines: str) -> None:
        manager.pending.path.write_text("\n".join(lines), encoding="utf-8")

    return _seed
