"""
MARK - Task Manager
===================
Pending and completed task files, and the operations that mutate them.
Each call is one load -> validate -> mutate -> persist cycle; nothing is
cached between calls, so the files are always the source of truth.
"""

import logging
from pathlib import Path
from typing import List, Optional

import pydantic

from .config import COMPLETED_FILE, PENDING_FILE
from .errors import MalformedLineError, ValidationError
from .schema import Report, Task, sort_tasks
from .store import LineStore

logger = logging.getLogger("mark")

NO_PENDING_MESSAGE = "There are no pending tasks!"


class TaskManager:
    """
    Priority-ordered task list backed by two text files.

    Pending file:   "<priority> <text>" per line, kept sorted by priority
    Completed file: "<text>" per line, in completion order

    Indexes are 1-based positions in the freshly sorted pending list and
    change whenever the list changes.
    """

    def __init__(
        self,
        tasks_dir: str = ".",
        pending_name: str = PENDING_FILE,
        completed_name: str = COMPLETED_FILE
    ):
        self.tasks_dir = Path(tasks_dir)
        self.pending = LineStore(self.tasks_dir / pending_name)
        self.completed = LineStore(self.tasks_dir / completed_name)

    def ensure_files(self) -> None:
        """Create both task files empty if they are missing"""
        self.pending.ensure()
        self.completed.ensure()

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def load_pending(self) -> List[Task]:
        """Pending tasks sorted by priority"""
        tasks = []
        for lineno, line in enumerate(self.pending.read(), start=1):
            try:
                tasks.append(Task.from_line(line))
            except (MalformedLineError, pydantic.ValidationError) as e:
                raise MalformedLineError(line, self.pending.path, lineno) from e
        return sort_tasks(tasks)

    def load_completed(self) -> List[str]:
        return self.completed.read()

    def save_pending(self, tasks: List[Task]) -> List[Task]:
        """Sort, then replace the pending file"""
        tasks = sort_tasks(tasks)
        self.pending.write_all(task.to_line() for task in tasks)
        return tasks

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, priority: int, text: str) -> Task:
        """Add a pending task and keep the file sorted"""
        if priority < 0:
            logger.warning(f"Rejected add with negative priority {priority}")
            raise ValidationError("Priority cannot be negative. Nothing added.")

        task = self._make_task(priority, text, "Nothing added.")
        tasks = self.load_pending()
        tasks.append(task)
        self.save_pending(tasks)

        logger.info(f"Added task: {task.text!r} with priority {task.priority}")
        return task

    def delete_task(self, index: int) -> Task:
        """Remove the pending task at a 1-based index"""
        tasks = self.load_pending()
        if index < 1 or index > len(tasks):
            logger.warning(f"Rejected delete of index {index} ({len(tasks)} pending)")
            raise ValidationError(f"task with index #{index} does not exist. Nothing deleted.")

        task = tasks.pop(index - 1)
        self.save_pending(tasks)

        logger.info(f"Deleted task #{index}: {task.text!r}")
        return task

    def complete_task(self, index: int) -> Task:
        """
        Move a pending task to the completed file, dropping its priority.

        The completed append and the pending rewrite are separate writes:
        a crash between them leaves the task in both files.
        """
        tasks = self.load_pending()
        if index <= 0 or index > len(tasks):
            logger.warning(f"Rejected done of index {index} ({len(tasks)} pending)")
            raise ValidationError(f"no incomplete item with index #{index} exists.")

        task = tasks.pop(index - 1)
        self.completed.append(task.text)
        self.save_pending(tasks)

        logger.info(f"Completed task #{index}: {task.text!r}")
        return task

    def update_task(self, index: int, priority: int, text: Optional[str] = "") -> Task:
        """
        Replace the priority (and, when text is given, the text) of a task.

        An empty text keeps the task's current text.
        """
        if priority < 0:
            logger.warning(f"Rejected update with negative priority {priority}")
            raise ValidationError("Priority cannot be negative. Nothing updated.")

        tasks = self.load_pending()
        if index < 1 or index > len(tasks):
            logger.warning(f"Rejected update of index {index} ({len(tasks)} pending)")
            raise ValidationError(f"no item with index #{index} exists.")

        old = tasks[index - 1]
        task = self._make_task(priority, text or old.text, "Nothing updated.")
        tasks[index - 1] = task
        self.save_pending(tasks)

        logger.info(f"Updated task #{index}: {old.to_line()!r} -> {task.to_line()!r}")
        return task

    # ========================================
    # REPORTING
    # ========================================

    def get_summary(self) -> Report:
        return Report(pending=self.load_pending(), completed=self.load_completed())

    def format_listing(self, tasks: Optional[List[Task]] = None) -> str:
        """Numbered pending listing, or the empty-list message"""
        if tasks is None:
            tasks = self.load_pending()
        if not tasks:
            return NO_PENDING_MESSAGE
        return "\n".join(
            f"{i}. {task.text} [{task.priority}]" for i, task in enumerate(tasks, start=1)
        )

    def get_report(self) -> str:
        """Pending count and listing, then completed count and entries"""
        summary = self.get_summary()

        lines = [
            f"Pending : {summary.pending_count}",
            self.format_listing(summary.pending),
            "",
            f"Completed : {summary.completed_count}",
        ]
        for i, text in enumerate(summary.completed, start=1):
            lines.append(f"{i}. {text}")

        return "\n".join(lines)

    # ========================================
    # HELPER METHODS
    # ========================================

    def _make_task(self, priority: int, text: str, outcome: str) -> Task:
        """Build a Task, reporting bad input as ValidationError"""
        try:
            return Task(priority=priority, text=text)
        except pydantic.ValidationError as e:
            problems = "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(f"Invalid task ({problems}). {outcome}") from e
