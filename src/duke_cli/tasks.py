"""Task models for the Duke task assistant."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import DukeError, ErrorKind


FIELD_SEPARATOR = " | "

# Every "|" inside a field is stored as "\|", so a bare " | " only ever separates fields.
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def escape_field(value: str) -> str:
    return value.replace("\\", "\\\\").replace("|", "\\|")


def unescape_field(value: str) -> str:
    return _ESCAPE_RE.sub(r"\1", value)


class TaskKind(Enum):
    """Task kinds, valued by their single-letter storage code."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task:
    """Base task with a description and a completion flag."""

    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind]

    def mark_as_done(self) -> None:
        """Mark the task as completed."""
        self.is_done = True

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def __str__(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}"

    def to_file_string(self) -> str:
        """Serialize the task into a single storage line."""
        done_flag = "1" if self.is_done else "0"
        return FIELD_SEPARATOR.join([self.kind.value, done_flag, escape_field(self.description)])


@dataclass
class Todo(Task):
    """A task without any date attached."""

    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass
class Deadline(Task):
    """A task that has to be done by a given (free-text) time."""

    by: str = ""

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    def __str__(self) -> str:
        return f"{super().__str__()} (by: {self.by})"

    def to_file_string(self) -> str:
        return f"{super().to_file_string()}{FIELD_SEPARATOR}{escape_field(self.by)}"


@dataclass
class Event(Task):
    """A task happening at a given (free-text) time."""

    at: str = ""

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def __str__(self) -> str:
        return f"{super().__str__()} (at: {self.at})"

    def to_file_string(self) -> str:
        return f"{super().to_file_string()}{FIELD_SEPARATOR}{escape_field(self.at)}"


def task_from_file_string(line: str) -> Task:
    """Rebuild a task from the line produced by ``Task.to_file_string``.

    Raises:
        DukeError: If the line is not a valid task line.
    """
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise DukeError(ErrorKind.STORAGE, f"Corrupted task line: {line!r}")

    code, done_flag = parts[0], parts[1]
    if done_flag not in ("0", "1"):
        raise DukeError(ErrorKind.STORAGE, f"Invalid completion flag in task line: {line!r}")
    is_done = done_flag == "1"

    try:
        kind = TaskKind(code)
    except ValueError:
        raise DukeError(ErrorKind.STORAGE, f"Unknown task type {code!r} in task line: {line!r}") from None

    fields = [unescape_field(part) for part in parts[2:]]
    expected = 1 if kind is TaskKind.TODO else 2
    if len(fields) != expected:
        raise DukeError(
            ErrorKind.STORAGE,
            f"Expected {expected} text field(s) for task type {code!r} in task line: {line!r}",
        )

    if kind is TaskKind.TODO:
        return Todo(fields[0], is_done)
    if kind is TaskKind.DEADLINE:
        return Deadline(fields[0], is_done, by=fields[1])
    return Event(fields[0], is_done, at=fields[1])
