"""Parser turning one line of user input into a Command."""

import logging
import re
import sys
from typing import List, Optional, Tuple

from fuzzywuzzy import fuzz, process

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
from .tasks import Deadline, Event, Todo

logger = logging.getLogger(__name__)

COMMAND_KEYWORDS = ["list", "todo", "deadline", "event", "done", "delete", "find", "bye"]

EVENT_DELIMITER = " /at "
DEADLINE_DELIMITER = " /by "

# Optional sign followed by ASCII digits only; no surrounding whitespace.
TASK_NUMBER_RE = re.compile(r"[+-]?[0-9]+")
MAX_TASK_NUMBER = sys.maxsize


def parse(answer: Optional[str], find_ignore_case: bool = False) -> Command:
    """Parse user input into the Command it describes.

    The first space separates the command keyword from the task details;
    the details are empty when the line has no space.

    Args:
        answer: One line of user input.
        find_ignore_case: Build ``find`` commands that match case-insensitively.

    Returns:
        The command to execute.

    Raises:
        DukeError: If the input is missing, malformed or not a known command.
    """
    if answer is None:
        raise DukeError(ErrorKind.NULL_INPUT, "User input is null.")

    command, _, task_details = answer.partition(" ")
    logger.debug("Parsing command %r with details %r", command, task_details)

    if command == "done":
        return DoneCommand(get_task_index(task_details))
    if command == "delete":
        return DeleteCommand(get_task_index(task_details))
    if command == "list":
        return ListCommand()
    if command == "todo":
        return AddTaskCommand(parse_todo(task_details))
    if command == "event":
        return AddTaskCommand(parse_event(task_details))
    if command == "deadline":
        return AddTaskCommand(parse_deadline(task_details))
    if command == "find":
        return FindTasksCommand(parse_keyword(task_details), ignore_case=find_ignore_case)
    if command == "bye":
        return ByeCommand()

    raise DukeError(ErrorKind.UNKNOWN_COMMAND, "Unknown command.", suggest_commands(command))


def suggest_commands(command: str) -> List[str]:
    """Suggest known keywords close to a mistyped one."""
    if not command:
        return []
    close_matches = process.extractBests(
        command, COMMAND_KEYWORDS, scorer=fuzz.ratio, score_cutoff=70, limit=2
    )
    return [f"Did you mean '{match[0]}'?" for match in close_matches]


def parse_keyword(task_details: str) -> str:
    if not task_details:
        raise DukeError(ErrorKind.EMPTY_KEYWORD, "Keyword for find command cannot be empty")
    return task_details


def check_empty_task_details(task_details: str) -> None:
    # Whitespace-only details are accepted.
    if not task_details:
        raise DukeError(ErrorKind.EMPTY_TASK_DETAILS, "Task details cannot be empty")


def parse_todo(task_details: str) -> Todo:
    check_empty_task_details(task_details)
    return Todo(task_details)


def _split_on_delimiter(task_details: str, delimiter: str, message: str) -> Tuple[str, str]:
    """Split at the first delimiter; later occurrences stay in the second part."""
    check_empty_task_details(task_details)
    description, sep, field = task_details.partition(delimiter)
    if not sep or not field:
        raise DukeError(ErrorKind.MISSING_DELIMITER, message)
    return description, field


def parse_event(task_details: str) -> Event:
    description, at = _split_on_delimiter(
        task_details, EVENT_DELIMITER, "Event descriptions must contain /at [dd-mm-yyyy hh:mm]"
    )
    return Event(description, at=at)


def parse_deadline(task_details: str) -> Deadline:
    description, by = _split_on_delimiter(
        task_details, DEADLINE_DELIMITER, "Deadline descriptions must contain /by [dd-mm-yyyy hh:mm]"
    )
    return Deadline(description, by=by)


def get_task_index(task_number: str) -> int:
    """Convert a 1-based task number typed by the user into a 0-based index.

    Raises:
        DukeError: ``INVALID_TASK_NUMBER_FORMAT`` if ``task_number`` is not an
            integer or is too large, ``NON_POSITIVE_TASK_NUMBER`` if it is zero or
            negative.
    """
    format_error = DukeError(
        ErrorKind.INVALID_TASK_NUMBER_FORMAT,
        "Invalid task number. Sample input with correct format: [command] [taskNo] eg. 'done 2'",
    )
    if not TASK_NUMBER_RE.fullmatch(task_number):
        raise format_error
    try:
        number = int(task_number)
    except ValueError:
        # Digit strings beyond the interpreter's conversion limit.
        raise format_error from None
    if abs(number) > MAX_TASK_NUMBER:
        raise format_error
    task_index = number - 1
    if task_index < 0:
        raise DukeError(
            ErrorKind.NON_POSITIVE_TASK_NUMBER,
            "Invalid task number. Task number should be positive.",
        )
    return task_index
