"""
MARK - Priority Task List
=========================

Personal task tracking in two plain text files: pending tasks kept sorted
by integer priority, and completed task texts in completion order.

Usage:
    from mark import TaskManager

    manager = TaskManager("~/tasks")
    manager.add_task(2, "hello world")
    print(manager.format_listing())     # 1. hello world [2]

    manager.complete_task(1)
    print(manager.get_report())
"""

from .errors import (
    MarkError,
    ValidationError,
    StorageError,
    MalformedLineError
)

from .schema import (
    Task,
    Report,
    split_line,
    join_line,
    sort_tasks
)

from .store import LineStore
from .manager import TaskManager

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "LineStore",
    "Task",
    "Report",
    "split_line",
    "join_line",
    "sort_tasks",
    "MarkError",
    "ValidationError",
    "StorageError",
    "MalformedLineError"
]
