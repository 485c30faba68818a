"""Task data model for the tasklist application."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Task:
    """A single to-do item as stored in the ``tasks`` table.

    Instances are transient copies of a row; the database owns the data.
    """

    id: int
    name: str
    date_added: str
    is_done: int = 0  # 0 = pending, 1 = done

    @property
    def done(self) -> bool:
        return self.is_done == 1

    @property
    def status_label(self) -> str:
        return "DONE" if self.done else "PENDING"

    @classmethod
    def from_row(cls, row) -> "Task":
        """Build a Task from a ``sqlite3.Row`` or a plain tuple."""
        return cls(
            id=int(row[0]),
            name=str(row[1]),
            date_added=str(row[2]),
            is_done=int(row[3]),
        )
