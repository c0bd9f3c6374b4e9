"""Tests for the console presentation layer."""

import io

import pytest
from rich.console import Console

from duke_cli.tasks import Deadline, Todo
from duke_cli.theme import DUKE_THEME
from duke_cli.ui import Ui


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture
def console_ui(buffer):
    console = Console(file=buffer, theme=DUKE_THEME, width=200, soft_wrap=True)
    return Ui(console, show_banner=False)


class TestUi:
    """Test messages printed for each notification."""

    def test_empty_task_list(self, console_ui, buffer):
        console_ui.show_task_list(())

        assert buffer.getvalue() == "There are no tasks in the list.\n"

    def test_numbered_task_list(self, console_ui, buffer):
        done = Deadline("return book", by="Monday")
        done.mark_as_done()

        console_ui.show_task_list((Todo("read book"), done))

        assert buffer.getvalue().splitlines() == [
            "Here are the tasks in your list:",
            "1. [T][ ] read book",
            "2. [D][X] return book (by: Monday)",
        ]

    def test_add_task(self, console_ui, buffer):
        console_ui.show_add_task(Todo("read book"), 1)

        assert buffer.getvalue().splitlines() == [
            "Got it. I've added this task:",
            "  [T][ ] read book",
            "Now you have 1 task in the list.",
        ]

    def test_delete_task_count(self, console_ui, buffer):
        console_ui.show_delete_task(Todo("read book"), 0)

        assert "Now you have 0 tasks in the list." in buffer.getvalue()

    def test_done_task(self, console_ui, buffer):
        todo = Todo("read book")
        todo.mark_as_done()

        console_ui.show_done_task(todo)

        assert "I've marked this task as done:" in buffer.getvalue()
        assert "[T][X] read book" in buffer.getvalue()

    def test_find_results(self, console_ui, buffer):
        console_ui.show_find_results([])
        console_ui.show_find_results([Todo("read book")])

        assert buffer.getvalue().splitlines() == [
            "No matching tasks found.",
            "Here are the matching tasks in your list:",
            "1. [T][ ] read book",
        ]

    def test_error_text_is_not_markup(self, console_ui, buffer):
        console_ui.show_error("use [command] [taskNo]", ["Did you mean 'list'?"])

        assert buffer.getvalue().splitlines() == [
            "OOPS!!! use [command] [taskNo]",
            "  Did you mean 'list'?",
        ]

    def test_welcome_without_banner(self, console_ui, buffer):
        console_ui.show_welcome()

        assert buffer.getvalue() == "Hello! I'm Duke. What can I do for you?\n"

    def test_welcome_with_banner(self, buffer):
        ui = Ui(Console(file=buffer, theme=DUKE_THEME, width=200))

        ui.show_welcome()

        assert "deadline" in buffer.getvalue()
        assert buffer.getvalue().endswith("Hello! I'm Duke. What can I do for you?\n")

    def test_read_command_end_of_input(self, console_ui, monkeypatch):
        def raise_eof(*args):
            raise EOFError
        monkeypatch.setattr("builtins.input", raise_eof)

        assert console_ui.read_command() is None

    def test_read_command(self, console_ui, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda *args: "list")

        assert console_ui.read_command() == "list"
