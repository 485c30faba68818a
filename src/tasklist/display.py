"""Rendering of task lists for the terminal."""

from typing import Iterable

from rich.console import Console
from rich.text import Text

from .task import Task
from .theme import decorate


DEFAULT_NAME_WIDTH = 44
ELLIPSIS = "..."


def truncate(text: str, max_len: int) -> str:
    """Shorten ``text`` to ``max_len`` characters, ending in an ellipsis.

    Strings already within the limit come back unchanged.
    """
    if len(text) <= max_len:
        return text
    return text[:max_len - len(ELLIPSIS)] + ELLIPSIS


def format_task_line(task: Task, name_width: int = DEFAULT_NAME_WIDTH) -> Text:
    """Format a task as one aligned line.

    Layout: ``  id | name | STATUS   date_added``. Padding is applied
    before styling so the columns line up with or without colour.
    """
    status_intent = "task_done" if task.done else "task_pending"
    return Text.assemble(
        decorate(f"{task.id:>4}", "task_id"),
        " | ",
        decorate(f"{truncate(task.name, name_width):<{name_width}}", "task_name"),
        " | ",
        decorate(f"{task.status_label:<8}", status_intent),
        " ",
        decorate(task.date_added, "task_date"),
    )


def print_task_list(
    console: Console, tasks: Iterable[Task], name_width: int = DEFAULT_NAME_WIDTH
) -> None:
    """Print one line per task; an empty iterable prints nothing."""
    for task in tasks:
        console.print(format_task_line(task, name_width), soft_wrap=True)
