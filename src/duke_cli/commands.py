"""Executable commands produced by the parser."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .tasks import Task
from .task_list import TaskList

if TYPE_CHECKING:
    from .storage import Storage
    from .ui import Ui


class Command(ABC):
    """A single parsed user action, executed once and then discarded."""

    @abstractmethod
    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        """Apply the command to ``tasks`` and report the outcome through ``ui``.

        Mutating commands report the change first and then save the list.

        Raises:
            DukeError: Propagated unchanged from the task list or storage.
        """

    def is_exit(self) -> bool:
        """Whether the session should end after this command."""
        return False

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


class AddTaskCommand(Command):
    """Append a task to the list."""

    def __init__(self, task: Task):
        self.task = task

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        tasks.add_new_task(self.task)
        ui.show_add_task(self.task, tasks.get_length())
        storage.save_tasks(tasks.get_task_strings())


class DoneCommand(Command):
    """Mark the task at a 0-based index as done."""

    def __init__(self, task_index: int):
        self.task_index = task_index

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        task = tasks.mark_task_done(self.task_index)
        ui.show_done_task(task)
        storage.save_tasks(tasks.get_task_strings())


class DeleteCommand(Command):
    """Delete the task at a 0-based index."""

    def __init__(self, task_index: int):
        self.task_index = task_index

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        task = tasks.delete_task(self.task_index)
        ui.show_delete_task(task, tasks.get_length())
        storage.save_tasks(tasks.get_task_strings())


class ListCommand(Command):
    """Show every task."""

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        ui.show_task_list(tasks.get_tasks())


class FindTasksCommand(Command):
    """Show the tasks whose description contains a keyword."""

    def __init__(self, keyword: str, ignore_case: bool = False):
        self.keyword = keyword
        self.ignore_case = ignore_case

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        ui.show_find_results(tasks.find_tasks(self.keyword, ignore_case=self.ignore_case))


class ByeCommand(Command):
    """End the session."""

    def execute(self, tasks: TaskList, ui: "Ui", storage: "Storage") -> None:
        ui.show_goodbye()

    def is_exit(self) -> bool:
        return True
