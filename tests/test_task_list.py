"""Tests for the TaskList collection."""

import pytest

from duke_cli.errors import DukeError, ErrorKind
from duke_cli.task_list import TaskList
from duke_cli.tasks import Deadline, Event, Todo


@pytest.fixture
def three_tasks():
    return TaskList([
        Todo("read book"),
        Deadline("return book", by="June 6th"),
        Event("project meeting", at="Aug 6th 2-4pm"),
    ])


class TestTaskList:
    """Test TaskList mutation and queries."""

    def test_starts_empty(self):
        tasks = TaskList()

        assert tasks.get_length() == 0
        assert tasks.get_tasks() == ()

    def test_hydrate_copies_input(self):
        source = [Todo("a")]
        tasks = TaskList(source)
        source.append(Todo("b"))

        assert tasks.get_length() == 1

    def test_add_appends_in_order(self):
        tasks = TaskList()
        tasks.add_new_task(Todo("first"))
        tasks.add_new_task(Todo("second"))

        assert len(tasks) == 2
        assert [t.description for t in tasks.get_tasks()] == ["first", "second"]

    def test_get_tasks_is_read_only_view(self, three_tasks):
        view = three_tasks.get_tasks()

        with pytest.raises(AttributeError):
            view.append(Todo("sneaky"))
        assert three_tasks.get_length() == 3

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_mark_done_flips_only_that_task(self, three_tasks, index):
        task = three_tasks.mark_task_done(index)

        assert task is three_tasks.get_tasks()[index]
        assert [t.is_done for t in three_tasks] == [i == index for i in range(3)]
        assert three_tasks.get_length() == 3

    def test_mark_done_twice_keeps_task_done(self, three_tasks):
        three_tasks.mark_task_done(0)
        three_tasks.mark_task_done(0)

        assert three_tasks.get_tasks()[0].is_done

    @pytest.mark.parametrize("index", [0, 1, 2])
    def test_delete_shifts_later_tasks_down(self, three_tasks, index):
        before = list(three_tasks.get_tasks())

        removed = three_tasks.delete_task(index)

        assert removed is before[index]
        assert three_tasks.get_length() == 2
        assert removed not in three_tasks.get_tasks()
        assert list(three_tasks.get_tasks()) == before[:index] + before[index + 1:]

    @pytest.mark.parametrize("index", [0, 5, -1])
    def test_empty_list_errors_regardless_of_index(self, index):
        tasks = TaskList()

        for operation in (tasks.mark_task_done, tasks.delete_task):
            with pytest.raises(DukeError) as exc_info:
                operation(index)
            assert exc_info.value.kind == ErrorKind.EMPTY_LIST
            assert exc_info.value.message == "There are no tasks in the list."

    @pytest.mark.parametrize("index", [3, 10, -1, -3])
    def test_out_of_range_index(self, three_tasks, index):
        for operation in (three_tasks.mark_task_done, three_tasks.delete_task):
            with pytest.raises(DukeError) as exc_info:
                operation(index)
            assert exc_info.value.kind == ErrorKind.INVALID_INDEX
            assert "There are only 3 tasks" in exc_info.value.message

        assert three_tasks.get_length() == 3
        assert not any(t.is_done for t in three_tasks)

    def test_task_strings_preserve_order(self, three_tasks):
        three_tasks.mark_task_done(1)

        assert three_tasks.get_task_strings() == [
            "T | 0 | read book",
            "D | 1 | return book | June 6th",
            "E | 0 | project meeting | Aug 6th 2-4pm",
        ]


class TestFindTasks:
    """Test keyword search over the task list."""

    def test_single_match(self, three_tasks):
        found = three_tasks.find_tasks("meeting")

        assert found == [three_tasks.get_tasks()[2]]
        assert three_tasks.get_length() == 3

    def test_matches_keep_list_order(self, three_tasks):
        found = three_tasks.find_tasks("book")

        assert [t.description for t in found] == ["read book", "return book"]

    def test_case_sensitive_by_default(self, three_tasks):
        assert three_tasks.find_tasks("Book") == []

    def test_ignore_case(self, three_tasks):
        found = three_tasks.find_tasks("BOOK", ignore_case=True)

        assert len(found) == 2

    def test_matches_description_only(self, three_tasks):
        assert three_tasks.find_tasks("June") == []

    def test_no_match(self, three_tasks):
        assert three_tasks.find_tasks("nothing") == []
