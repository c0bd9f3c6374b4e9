"""Error types raised by the Duke task assistant."""

from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    """Discriminant for every recoverable failure the assistant reports."""
    NULL_INPUT = "null_input"
    UNKNOWN_COMMAND = "unknown_command"
    EMPTY_TASK_DETAILS = "empty_task_details"
    MISSING_DELIMITER = "missing_delimiter"
    EMPTY_KEYWORD = "empty_keyword"
    INVALID_TASK_NUMBER_FORMAT = "invalid_task_number_format"
    NON_POSITIVE_TASK_NUMBER = "non_positive_task_number"
    EMPTY_LIST = "empty_list"
    INVALID_INDEX = "invalid_index"
    STORAGE = "storage"
    CONFIG = "config"


class DukeError(Exception):
    """Exception raised when a command cannot be parsed or executed."""

    def __init__(self, kind: ErrorKind, message: str, suggestions: Optional[List[str]] = None):
        self.kind = kind
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DukeError(kind={self.kind.name}, message={self.message!r})"
