import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000

# YYYY-MM-DD with month 01-12 and day 01-31, ASCII digits only.
# Calendar existence is not checked: 2024-02-30 matches.
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])")

# Unicode whitespace plus the byte-order mark, which str.strip() keeps.
_EDGE_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(value: str) -> str:
    return _EDGE_BLANKS.sub("", value)


@dataclass
class TaskForm:
    """Trimmed title/description/due_date as submitted from a task form."""

    title: str = ""
    description: str = ""
    due_date: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TaskForm":
        return cls(
            title=trim(data.get("title") or ""),
            description=trim(data.get("description") or ""),
            due_date=trim(data.get("due_date") or ""),
        )

    def due_date_or_none(self) -> Optional[str]:
        return self.due_date or None


def is_iso_date(value: str) -> bool:
    """Shape check only: ``2024-13-01`` fails, ``2024-02-30`` passes."""
    return isinstance(value, str) and ISO_DATE_PATTERN.fullmatch(value) is not None


def validate_task(form: TaskForm) -> List[str]:
    """
    Checks a task form against the field constraints.
    Returns every violation in a fixed order; an empty list means valid.
    """
    title = trim(form.title)
    description = trim(form.description)
    due_date = trim(form.due_date)

    errors = []
    if not title:
        errors.append("Title is required.")
    if len(title) > TITLE_MAX_LENGTH:
        errors.append(f"Title must be {TITLE_MAX_LENGTH} characters or fewer.")
    if len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(f"Description must be {DESCRIPTION_MAX_LENGTH} characters or fewer.")
    if due_date and not is_iso_date(due_date):
        errors.append("Please use the date picker (YYYY-MM-DD).")
    return errors
