"""Storage layer for Duke using a markdown file with YAML frontmatter.

The frontmatter holds the authoritative list of serialized tasks; the
markdown body is a read-only listing for humans browsing the data file.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

import frontmatter
import yaml

from .errors import DukeError, ErrorKind
from .tasks import Task, task_from_file_string

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class TaskFileFormat:
    """Handles conversion between serialized task lines and the data file."""

    @staticmethod
    def dumps(task_strings: Sequence[str]) -> str:
        """Build the data file content for the given task lines."""
        content_lines = ["# Tasks", ""]
        if task_strings:
            content_lines.extend(f"- {line}" for line in task_strings)
        else:
            content_lines.append("_No tasks._")

        post = frontmatter.Post(
            "\n".join(content_lines),
            format=FORMAT_VERSION,
            saved=datetime.now(timezone.utc).isoformat(),
            count=len(task_strings),
            tasks=list(task_strings),
        )
        return frontmatter.dumps(post)

    @staticmethod
    def loads(content: str) -> List[Task]:
        """Parse data file content back into tasks.

        Raises:
            DukeError: If the frontmatter or any task line is malformed.
        """
        try:
            post = frontmatter.loads(content)
        except yaml.YAMLError as e:
            raise DukeError(ErrorKind.STORAGE, f"Invalid task file header: {e}") from e

        raw_tasks = post.metadata.get("tasks") or []
        if not isinstance(raw_tasks, list):
            raise DukeError(ErrorKind.STORAGE, "Task file header 'tasks' must be a list")
        return [task_from_file_string(str(line)) for line in raw_tasks]


class Storage:
    """File-based storage for the task list."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load_tasks(self) -> List[Task]:
        """Load the saved tasks; a missing file means no tasks yet.

        Raises:
            DukeError: If the file cannot be read or is corrupted.
        """
        if not self.path.exists():
            logger.info("No task file at %s, starting with an empty list", self.path)
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise DukeError(ErrorKind.STORAGE, f"Unable to read {self.path}: {e}") from e

        tasks = TaskFileFormat.loads(content)
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, task_strings: Sequence[str]) -> None:
        """Overwrite the task file with the given serialized tasks.

        Raises:
            DukeError: If the file cannot be written.
        """
        content = TaskFileFormat.dumps(task_strings)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            logger.error("Saving tasks to %s failed: %s", self.path, e)
            raise DukeError(
                ErrorKind.STORAGE,
                f"Unable to save tasks to {self.path}: {e}. "
                "The change is kept for this session only.",
            ) from e
        logger.debug("Saved %d tasks to %s", len(task_strings), self.path)
