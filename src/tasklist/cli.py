"""Command-line interface for tasklist."""

import functools
import logging
import re
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

import click
from rich.console import Console
from rich.text import Text

from .config import Config, ConfigModel, get_config
from .display import print_task_list
from .logging_setup import setup_logging
from .storage import BootstrapError, StorageError, TaskStore
from .theme import get_themed_console, show_help


logger = logging.getLogger(__name__)

TASK_ID_RE = re.compile(r"[+-]?\d+", re.ASCII)
TASK_ID_MIN = -2**31
TASK_ID_MAX = 2**31 - 1

# Subcommands take their arguments as-is: no --help of their own, and
# unexpected words or options are ignored rather than rejected.
RAW_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


class TaskGroup(click.Group):
    """Command group that turns anything it doesn't recognise into ``help``."""

    def parse_args(self, ctx, args):
        args = list(args)
        takes_value = set()
        known = set()
        for param in self.params:
            if isinstance(param, click.Option):
                names = param.opts + param.secondary_opts
                known.update(names)
                if not param.is_flag:
                    takes_value.update(names)

        # Leading options: keep the ones this group declares, anything
        # else (including -h/--help) means the user wants help.
        i = 0
        while i < len(args) and args[i].startswith("-") and args[i] != "-":
            opt = args[i].split("=", 1)[0]
            if opt not in known:
                args = args[:i] + ["help"]
                break
            i += 2 if opt in takes_value and "=" not in args[i] else 1
        return super().parse_args(ctx, args)

    def resolve_command(self, ctx, args):
        if self.get_command(ctx, args[0]) is None:
            return "help", self.get_command(ctx, "help"), args[1:]
        return super().resolve_command(ctx, args)


def get_console(ctx: Optional[click.Context] = None) -> Console:
    """Get the console for the running command."""
    ctx = ctx or click.get_current_context()
    ctx.ensure_object(dict)
    if "console" not in ctx.obj:
        ctx.obj["console"] = get_themed_console()
    return ctx.obj["console"]


def get_store(ctx: Optional[click.Context] = None) -> TaskStore:
    """Get the task store, opening the database on first use."""
    ctx = ctx or click.get_current_context()
    ctx.ensure_object(dict)
    store = ctx.obj.get("store")
    if store is None:
        config = ctx.obj.get("config") or get_config()
        store = TaskStore.open(config)
        ctx.obj["store"] = store
        ctx.find_root().call_on_close(store.close)
    return store


def report_storage_errors(func):
    """Turn storage failures into an error message and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BootstrapError as e:
            logger.error(f"Could not prepare the task database: {e}")
            get_console().print(Text(f"Fatal: {e}"), style="error")
            sys.exit(1)
        except StorageError as e:
            logger.error(f"Storage failure: {e}")
            get_console().print(Text(f"Error: {e}"), style="error")
            sys.exit(1)

    return wrapper


def _usage_error(console: Console) -> None:
    show_help(console)
    sys.exit(1)


def _parse_task_id(args: Sequence[str]) -> Optional[int]:
    """Return the first argument as a task id, or None if it isn't one."""
    if not args:
        return None
    if not TASK_ID_RE.fullmatch(args[0]):
        return None
    task_id = int(args[0])
    if not TASK_ID_MIN <= task_id <= TASK_ID_MAX:
        return None
    return task_id


@click.group(cls=TaskGroup, invoke_without_command=True, add_help_option=False)
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--db", "db_path", type=click.Path(dir_okay=False),
              help="Path to the SQLite database (default: ~/tasks_db/tasks.sqlite)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config_path, db_path, verbose):
    """tasklist - a to-do list kept in a local SQLite database."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    config: Optional[ConfigModel] = ctx.obj.get("config")
    if config is None:
        config = Config.reload(config_path) if config_path else get_config()
    if db_path:
        config = replace(config, db_path=db_path)
    ctx.obj["config"] = config

    setup_logging(verbose, config.log_level)
    console = ctx.obj.setdefault("console", get_themed_console(config.no_color))

    if ctx.invoked_subcommand is None:
        console.print("No arguments were passed!", style="warning")
        _usage_error(console)


@cli.command(context_settings=RAW_ARGS, add_help_option=False)
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@report_storage_errors
def add(words):
    """Add a new task."""
    console = get_console()
    name = " ".join(words)
    if not name.strip():
        _usage_error(console)

    task_id = get_store().add(name)
    console.print(Text(f"Added task {task_id}: {name}"), style="success")


@cli.command("list", context_settings=RAW_ARGS, add_help_option=False)
@report_storage_errors
def list_cmd():
    """List all tasks."""
    console = get_console()
    config = click.get_current_context().obj["config"]

    tasks = get_store().list_tasks(sort_by_status=False)
    if not tasks:
        console.print("No tasks found.", style="warning")
        return

    console.print("To-Do List (sorted by id):", style="header")
    print_task_list(console, tasks, config.name_width)


@cli.command(context_settings=RAW_ARGS, add_help_option=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@report_storage_errors
def mark(args):
    """Toggle the status of a task (Done/Pending)."""
    console = get_console()
    task_id = _parse_task_id(args)
    if task_id is None:
        _usage_error(console)

    if get_store().toggle(task_id) == 0:
        console.print(f"No task found with id: {task_id}", style="warning")
    else:
        console.print(f"Toggled task with id: {task_id}", style="success")


@cli.command(context_settings=RAW_ARGS, add_help_option=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@report_storage_errors
def rm(args):
    """Remove a task."""
    console = get_console()
    task_id = _parse_task_id(args)
    if task_id is None:
        _usage_error(console)

    if get_store().remove(task_id) == 0:
        console.print(f"No task found with id: {task_id}", style="warning")
    else:
        console.print(f"Removed task with id: {task_id}", style="success")


@cli.command(context_settings=RAW_ARGS, add_help_option=False)
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@report_storage_errors
def reset(yes):
    """Delete all tasks and restart ids at 1."""
    console = get_console()
    if not yes:
        try:
            confirmed = click.confirm(
                click.style("Are you sure you want to delete all tasks?", fg="red", bold=True)
            )
        except click.Abort:
            console.print("Error processing input.", style="error")
            return
        if not confirmed:
            console.print("Reset aborted.", style="warning")
            return

    get_store().reset()
    console.print("Database reset. All tasks have been deleted.", style="success")


@cli.command(context_settings=RAW_ARGS, add_help_option=False)
def sort():
    """Sort completed and uncompleted tasks."""
    # Accepted but does nothing: list output is always ordered by id.
    logger.debug("sort is a no-op")


@cli.command("help", context_settings=RAW_ARGS, add_help_option=False)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def help_cmd(args):
    """Show the available commands."""
    show_help(get_console())


def main(argv: Optional[Sequence[str]] = None):
    """Console script entry point."""
    return cli.main(args=list(argv) if argv is not None else None, prog_name="todo")
