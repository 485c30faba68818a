"""Tests for task list rendering."""

import io

from rich.console import Console

from tasklist.display import format_task_line, print_task_list, truncate
from tasklist.task import Task
from tasklist.theme import TASKLIST_THEME, decorate


def make_console():
    buffer = io.StringIO()
    console = Console(file=buffer, theme=TASKLIST_THEME, no_color=True, width=200)
    return console, buffer


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("Buy milk", 44) == "Buy milk"

    def test_exact_width_unchanged(self):
        text = "x" * 44
        assert truncate(text, 44) == text

    def test_one_over_is_truncated(self):
        text = "abcdefghij" * 4 + "klmno"  # 45 characters
        result = truncate(text, 44)

        assert len(result) == 44
        assert result == text[:41] + "..."

    def test_empty_text(self):
        assert truncate("", 10) == ""


class TestFormatTaskLine:
    def test_pending_layout(self):
        task = Task(id=1, name="Buy milk", date_added="2024-01-02 03:04:05", is_done=0)

        line = format_task_line(task)

        assert line.plain == (
            "   1 | " + "Buy milk".ljust(44) + " | PENDING  2024-01-02 03:04:05"
        )

    def test_done_label(self):
        task = Task(id=12, name="Done thing", date_added="2024-01-02 03:04:05", is_done=1)

        line = format_task_line(task)

        assert "| DONE     2024-01-02" in line.plain
        assert line.plain.startswith("  12 | ")

    def test_long_name_is_truncated(self):
        task = Task(id=3, name="y" * 60, date_added="2024-01-02 03:04:05")

        line = format_task_line(task, name_width=20)

        assert "| " + "y" * 17 + "... |" in line.plain

    def test_status_styles(self):
        pending = format_task_line(Task(1, "a", "2024-01-01 00:00:00", 0))
        done = format_task_line(Task(2, "b", "2024-01-01 00:00:00", 1))

        pending_styles = {str(span.style) for span in pending.spans}
        done_styles = {str(span.style) for span in done.spans}
        assert "task_pending" in pending_styles
        assert "task_done" in done_styles

    def test_does_not_mutate_task(self):
        task = Task(id=5, name="z" * 50, date_added="2024-01-02 03:04:05")
        format_task_line(task)
        assert task.name == "z" * 50


class TestPrintTaskList:
    def test_one_line_per_task(self):
        console, buffer = make_console()
        tasks = [
            Task(1, "first", "2024-01-01 00:00:00", 0),
            Task(2, "second", "2024-01-01 00:00:00", 1),
        ]

        print_task_list(console, tasks)

        lines = buffer.getvalue().splitlines()
        assert len(lines) == 2
        assert "first" in lines[0] and "PENDING" in lines[0]
        assert "second" in lines[1] and "DONE" in lines[1]

    def test_empty_list_prints_nothing(self):
        console, buffer = make_console()
        print_task_list(console, [])
        assert buffer.getvalue() == ""


class TestDecorate:
    def test_keeps_text(self):
        assert decorate("[not markup]", "task_name").plain == "[not markup]"

    def test_unknown_intent_is_plain(self):
        text = decorate("hello", "no_such_intent")
        assert text.plain == "hello"
        assert text.style == ""
