"""Duke - a command-line task-tracking assistant."""

__version__ = "0.1.0"

from .commands import (
    AddTaskCommand,
    ByeCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    FindTasksCommand,
    ListCommand,
)
from .errors import DukeError, ErrorKind
from .parser import parse
from .task_list import TaskList
from .tasks import Deadline, Event, Task, TaskKind, Todo

__all__ = [
    "AddTaskCommand",
    "ByeCommand",
    "Command",
    "DeleteCommand",
    "DoneCommand",
    "FindTasksCommand",
    "ListCommand",
    "DukeError",
    "ErrorKind",
    "parse",
    "TaskList",
    "Task",
    "TaskKind",
    "Todo",
    "Deadline",
    "Event",
    "__version__",
]
