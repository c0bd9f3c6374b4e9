"""Ordered, index-addressable collection of tasks."""

import logging
from typing import Iterable, List, Optional, Tuple

from .errors import DukeError, ErrorKind
from .tasks import Task

logger = logging.getLogger(__name__)


class TaskList:
    """Mutable list of tasks in insertion order.

    Indices are 0-based here; the parser converts the 1-based task numbers
    typed by the user before they reach this class.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks is not None else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self._tasks)

    def get_length(self) -> int:
        return len(self._tasks)

    def get_tasks(self) -> Tuple[Task, ...]:
        """Return a read-only view of the tasks in order."""
        return tuple(self._tasks)

    def add_new_task(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Added task %r, list now has %d tasks", task, len(self._tasks))

    def mark_task_done(self, index: int) -> Task:
        """Mark the task at ``index`` as done and return it.

        Raises:
            DukeError: ``EMPTY_LIST`` if there are no tasks, ``INVALID_INDEX``
                if ``index`` is outside the list.
        """
        self._validate_index(index)
        task = self._tasks[index]
        task.mark_as_done()
        logger.debug("Marked task %d as done", index)
        return task

    def delete_task(self, index: int) -> Task:
        """Remove the task at ``index`` and return it; later tasks shift down by one."""
        self._validate_index(index)
        task = self._tasks.pop(index)
        logger.debug("Deleted task %d, list now has %d tasks", index, len(self._tasks))
        return task

    def find_tasks(self, keyword: str, ignore_case: bool = False) -> List[Task]:
        """Return the tasks whose description contains ``keyword``, in list order.

        Matching is case-sensitive unless ``ignore_case`` is set.
        """
        if ignore_case:
            needle = keyword.casefold()
            return [t for t in self._tasks if needle in t.description.casefold()]
        return [t for t in self._tasks if keyword in t.description]

    def get_task_strings(self) -> List[str]:
        """Serialized form of every task, in order, for the storage layer."""
        return [task.to_file_string() for task in self._tasks]

    def _validate_index(self, index: int) -> None:
        task_count = len(self._tasks)
        if task_count == 0:
            raise DukeError(ErrorKind.EMPTY_LIST, "There are no tasks in the list.")
        # Negative indices would silently address from the end of the list.
        if index < 0 or index >= task_count:
            raise DukeError(
                ErrorKind.INVALID_INDEX,
                f"Invalid task number. There are only {task_count} tasks in the list",
            )
