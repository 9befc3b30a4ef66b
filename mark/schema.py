"""
MARK - Task Schema Definition
=============================
One pending task per line: "<priority> <text>".
Completed tasks keep only their text.
"""

import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_validator

from .errors import MalformedLineError

# Leading non-whitespace run, then exactly one separator character
_LINE_RE = re.compile(r"(\S+)\s(.*)", re.DOTALL)


def split_line(line: str) -> Tuple[str, Optional[str]]:
    """Split a stored line into (priority token, text).

    The text is None when the line has no separator after its leading token.
    """
    match = _LINE_RE.fullmatch(line)
    if not match:
        return line, None
    return match.group(1), match.group(2)


def join_line(priority, text: str) -> str:
    """Encode a task as a single stored line"""
    return f"{priority} {text}"


class Task(BaseModel):
    """Individual pending task"""
    priority: int = Field(ge=0)     # Lower sorts first
    text: str = Field(min_length=1)

    @field_validator("text")
    @classmethod
    def _single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("task text must be a single line")
        return value

    def to_line(self) -> str:
        return join_line(self.priority, self.text)

    @classmethod
    def from_line(cls, line: str) -> "Task":
        """Strict decode; raises MalformedLineError instead of guessing"""
        token, text = split_line(line)
        if not text or not token.isdecimal():
            raise MalformedLineError(line)
        return cls(priority=int(token), text=text)


class Report(BaseModel):
    """Snapshot of both collections"""
    pending: List[Task] = Field(default_factory=list)
    completed: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def pending_count(self) -> int:
        return len(self.pending)

    @computed_field
    @property
    def completed_count(self) -> int:
        return len(self.completed)


def sort_tasks(tasks: List[Task]) -> List[Task]:
    """Ascending by priority; ties keep their current order"""
    return sorted(tasks, key=lambda task: task.priority)
