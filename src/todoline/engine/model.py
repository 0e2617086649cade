# src/todoline/engine/model.py

"""
Core domain models.

This module defines the in-memory representation of a todo.txt line
(TodoEntry) and of the tags embedded in its description, along with
their core invariants.

No parsing or text scanning should happen here.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Union


_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_PRIORITY_RE = re.compile(r"[A-Z]", re.ASCII)


# ---------------------------------------------------------------------
# TodoEntry
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TodoEntry:
    """
    In-memory representation of a single todo.txt line.

    Notes:
    - dates are kept as strings; only their YYYY-MM-DD shape is checked.
    - completion_date requires creation_date (a lone date is always
      a creation date).
    - done carries no relationship to the dates.
    """

    done: bool = False
    priority: str | None = None
    completion_date: str | None = None
    creation_date: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if self.priority is not None and not _PRIORITY_RE.fullmatch(self.priority):
            raise ValueError(f"priority must be a single letter A-Z, got {self.priority!r}")

        for name in ("completion_date", "creation_date"):
            value = getattr(self, name)
            if value is not None and not _DATE_RE.fullmatch(value):
                raise ValueError(f"{name} must look like YYYY-MM-DD, got {value!r}")

        if self.completion_date is not None and self.creation_date is None:
            raise ValueError("completion_date requires creation_date")

    # -----------------------------------------------------------------
    # Derived data
    # -----------------------------------------------------------------

    def tags(self) -> list["Tag"]:
        """Tags embedded in the description, in order of appearance."""
        from .tags import extract_tags

        return extract_tags(self.description)

    # -----------------------------------------------------------------
    # Record conversion
    # -----------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "done": self.done,
            "priority": self.priority,
            "completion_date": self.completion_date,
            "creation_date": self.creation_date,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TodoEntry":
        """
        Build an entry from a plain mapping (e.g. a YAML record).

        Unknown keys (such as derived `tags`) are ignored. Dates may be
        given as ISO strings or as date objects, since YAML loaders turn
        unquoted ISO dates into dates.
        """
        if not isinstance(data, Mapping):
            raise ValueError("record must be a mapping")

        done = data.get("done", False)
        if not isinstance(done, bool):
            raise ValueError("record key 'done' must be a boolean")

        priority = data.get("priority")
        if priority is not None and not isinstance(priority, str):
            raise ValueError("record key 'priority' must be a string")

        description = data.get("description", "")
        if description is None:
            description = ""
        if not isinstance(description, str):
            raise ValueError("record key 'description' must be a string")

        return cls(
            done=done,
            priority=priority,
            completion_date=_date_field(data, "completion_date"),
            creation_date=_date_field(data, "creation_date"),
            description=description,
        )


def _date_field(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)

    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date().isoformat()

    if isinstance(value, date):
        return value.isoformat()

    if isinstance(value, str):
        return value

    raise ValueError(f"record key '{key}' must be an ISO date string")


# ---------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Project:
    """A `+name` word."""

    name: str

    def __str__(self) -> str:
        return f"+{self.name}"

    def to_dict(self) -> dict[str, str]:
        return {"project": self.name}


@dataclass(frozen=True, slots=True)
class Context:
    """An `@name` word."""

    name: str

    def __str__(self) -> str:
        return f"@{self.name}"

    def to_dict(self) -> dict[str, str]:
        return {"context": self.name}


@dataclass(frozen=True, slots=True)
class KeyValue:
    """
    A `key:value` word.

    Only the first colon separates key from value,
    so `value` may itself contain colons.
    """

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}:{self.value}"

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}


Tag = Union[Project, Context, KeyValue]
