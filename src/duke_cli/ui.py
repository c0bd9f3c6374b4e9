"""Text-based presentation for the Duke task assistant."""

from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .tasks import Task
from .theme import get_task_style, get_themed_console

LOGO = r"""
 ____        _        
|  _ \ _   _| | _____ 
| | | | | | | |/ / _ \
| |_| | |_| |   <  __/
|____/ \__,_|_|\_\___|
"""

HELP_TEXT = """[bright]Commands:[/bright]
  [primary]todo[/primary] [muted]<description>[/muted]
  [primary]deadline[/primary] [muted]<description> /by <when>[/muted]
  [primary]event[/primary] [muted]<description> /at <when>[/muted]
  [primary]list[/primary]
  [primary]done[/primary] [muted]<task number>[/muted]
  [primary]delete[/primary] [muted]<task number>[/muted]
  [primary]find[/primary] [muted]<keyword>[/muted]
  [primary]bye[/primary]"""


class Ui:
    """Renders command outcomes and reads user input through a rich console."""

    def __init__(self, console: Optional[Console] = None, show_banner: bool = True):
        self.console = console or get_themed_console()
        self.show_banner = show_banner

    def read_command(self) -> Optional[str]:
        """Read the next line of input, or ``None`` when input is exhausted."""
        try:
            return self.console.input("")
        except EOFError:
            return None

    def show_welcome(self) -> None:
        if self.show_banner:
            self.console.print(Panel(
                Text(LOGO.strip("\n"), style="primary"),
                title="[bright]Hello from[/bright]",
                border_style="border",
                expand=False,
            ))
            self.console.print(HELP_TEXT)
        self.console.print("Hello! I'm Duke. What can I do for you?")

    def show_goodbye(self) -> None:
        self.console.print("Bye. Hope to see you again soon!")

    def show_add_task(self, task: Task, task_count: int) -> None:
        self.console.print("Got it. I've added this task:")
        self._print_task(task, indent="  ")
        self._print_task_count(task_count)

    def show_done_task(self, task: Task) -> None:
        self.console.print("[success]Nice![/success] I've marked this task as done:")
        self._print_task(task, indent="  ")

    def show_delete_task(self, task: Task, task_count: int) -> None:
        self.console.print("Noted. I've removed this task:")
        self._print_task(task, indent="  ")
        self._print_task_count(task_count)

    def show_task_list(self, tasks: Sequence[Task]) -> None:
        """Print every task with its 1-based task number."""
        if not tasks:
            self.console.print("There are no tasks in the list.")
            return
        self.console.print("Here are the tasks in your list:")
        self._print_numbered(tasks)

    def show_find_results(self, tasks: Sequence[Task]) -> None:
        if not tasks:
            self.console.print("No matching tasks found.")
            return
        self.console.print("Here are the matching tasks in your list:")
        self._print_numbered(tasks)

    def show_error(self, message: str, suggestions: Optional[List[str]] = None) -> None:
        self.console.print(f"[error]OOPS!!! {escape(message)}[/error]")
        for suggestion in suggestions or []:
            self.console.print(f"  [accent]{escape(suggestion)}[/accent]")

    def show_loading_error(self, message: str) -> None:
        self.console.print(f"[warning]Could not load saved tasks: {escape(message)}[/warning]")
        self.console.print("[muted]Starting with an empty task list.[/muted]")

    def _print_numbered(self, tasks: Sequence[Task]) -> None:
        for number, task in enumerate(tasks, start=1):
            line = Text(f"{number}.", style="task_number")
            line.append(" ")
            line.append(str(task), style=get_task_style(task.is_done))
            self.console.print(line)

    def _print_task(self, task: Task, indent: str = "") -> None:
        self.console.print(Text(indent + str(task), style=get_task_style(task.is_done)))

    def _print_task_count(self, task_count: int) -> None:
        noun = "task" if task_count == 1 else "tasks"
        self.console.print(f"Now you have {task_count} {noun} in the list.")
