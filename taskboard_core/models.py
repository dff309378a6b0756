from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


@dataclass
class Task:
    """A single to-do item as stored in the tasks table."""

    id: int
    title: str
    description: str = ""
    due_date: Optional[str] = None
    completed: bool = False
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Task":
        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"] or "",
            due_date=row["due_date"] or None,
            completed=bool(row["completed"]),
            created_at=row["created_at"],
        )


class Outcome(str, Enum):
    """Outcome codes carried in ``?ok=`` after a successful write."""

    CREATED = "created"
    COMPLETED = "completed"
    REOPENED = "reopened"
    DELETED = "deleted"
    UPDATED = "updated"

    @property
    def message(self) -> str:
        return _OUTCOME_MESSAGES[self]

    @classmethod
    def from_code(cls, code: Optional[str]) -> Optional["Outcome"]:
        """Returns the outcome for ``code``, or None for unknown/absent codes."""
        if not code:
            return None
        try:
            return cls(code)
        except ValueError:
            return None


_OUTCOME_MESSAGES = {
    Outcome.CREATED: "Task added.",
    Outcome.COMPLETED: "Task marked complete.",
    Outcome.REOPENED: "Task marked active.",
    Outcome.DELETED: "Task deleted.",
    Outcome.UPDATED: "Task updated.",
}
