"""tasklist - a command-line to-do list backed by a local SQLite database."""

__version__ = "0.1.0"
__author__ = "tasklist Team"

from .task import Task
from .storage import TaskStore, StorageError, BootstrapError, open_connection

__all__ = ["Task", "TaskStore", "StorageError", "BootstrapError", "open_connection", "__version__"]
