"""Theming for tasklist console output.

All colour decisions go through named intents of a Rich theme, so the
rendering code never deals with raw colour names.
"""

from typing import Dict

from rich.console import Console
from rich.text import Text
from rich.theme import Theme


CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'secondary': '#5CCFE6',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'critical': '#FF5370',
    'text_muted': '#4F5B66',
    'text_bright': '#FFFFFF',
}

INTENT_STYLES: Dict[str, str] = {
    'task_id': f"{CITY_LIGHTS_COLORS['primary']} bold",
    'task_name': f"{CITY_LIGHTS_COLORS['text_bright']}",
    'task_done': f"{CITY_LIGHTS_COLORS['success']}",
    'task_pending': f"{CITY_LIGHTS_COLORS['critical']}",
    'task_date': "dim",
    'header': f"{CITY_LIGHTS_COLORS['text_bright']} bold",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'help_title': "magenta bold",
    'help_text': f"{CITY_LIGHTS_COLORS['secondary']}",
}

TASKLIST_THEME = Theme(INTENT_STYLES)


def decorate(text: str, intent: str) -> Text:
    """Wrap ``text`` in the style registered for ``intent``.

    The characters are never changed; unknown intents render unstyled.
    """
    if intent not in INTENT_STYLES:
        return Text(text)
    return Text(text, style=intent)


def get_themed_console(no_color: bool = False) -> Console:
    """Get a console instance with the tasklist theme applied."""
    return Console(theme=TASKLIST_THEME, no_color=no_color, highlight=False)


HELP_TITLE = "\nAvailable commands:"

HELP_TEXT = """
    - add [TASK]
        Adds a new task
        Example: todo add "Build a tree"

    - list
        Lists all tasks
        Example: todo list

    - mark [ID]
        Toggles the status of a task (Done/Pending)
        Example: todo mark 2

    - rm [ID]
        Removes a task
        Example: todo rm 4

    - sort
        Sorts completed and uncompleted tasks

    - reset
        Deletes all tasks
"""


def show_help(console: Console) -> None:
    """Print the list of available commands."""
    console.print(decorate(HELP_TITLE, 'help_title'))
    console.print(decorate(HELP_TEXT, 'help_text'))
