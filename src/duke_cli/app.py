"""Interactive session wiring the parser, task list, storage and ui together."""

import logging
from typing import Iterable, Optional

from .errors import DukeError
from .parser import parse
from .storage import Storage
from .task_list import TaskList
from .ui import Ui

logger = logging.getLogger(__name__)


class Duke:
    """A single assistant session over one task file."""

    def __init__(
        self,
        storage: Storage,
        ui: Ui,
        task_list: Optional[TaskList] = None,
        find_ignore_case: bool = False,
    ):
        self.storage = storage
        self.ui = ui
        self.find_ignore_case = find_ignore_case
        self.tasks = task_list if task_list is not None else self._load_task_list()

    def _load_task_list(self) -> TaskList:
        try:
            return TaskList(self.storage.load_tasks())
        except DukeError as e:
            logger.warning("Loading tasks failed: %s", e.message)
            self.ui.show_loading_error(e.message)
            return TaskList()

    def run_line(self, line: Optional[str]) -> bool:
        """Parse and execute one line of input.

        Errors are reported through the ui and never end the session.

        Returns:
            True if the session should end.
        """
        try:
            command = parse(line, find_ignore_case=self.find_ignore_case)
            command.execute(self.tasks, self.ui, self.storage)
        except DukeError as e:
            logger.debug("Command %r failed: %r", line, e)
            self.ui.show_error(e.message, e.suggestions)
            return False
        return command.is_exit()

    def run_lines(self, lines: Iterable[str]) -> None:
        """Execute lines in order, stopping early at an exit command."""
        for line in lines:
            if self.run_line(line):
                break

    def run(self) -> None:
        """Main loop: read, parse and execute commands until ``bye`` or end of input."""
        self.ui.show_welcome()
        try:
            while True:
                line = self.ui.read_command()
                if line is None:
                    logger.debug("Input exhausted, ending session")
                    break
                if self.run_line(line):
                    break
        except KeyboardInterrupt:
            logger.debug("Interrupted, ending session")
            self.ui.show_goodbye()
