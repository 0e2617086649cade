# src/todoline/engine/render.py

"""
Rendering helpers.

This module is responsible for:
- serialising a TodoEntry back to its canonical todo.txt line,
- rendering tag sequences for CLI output.

It is presentation-only: it never parses lines or inspects descriptions.
"""

from typing import Iterable

from .model import Tag, TodoEntry


# ---------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------

def format_entry(entry: TodoEntry) -> str:
    """
    Render an entry as a canonical todo.txt line.

    Each present prefix field is followed by exactly one space;
    absent fields contribute nothing. For any canonical line L:

        format_entry(parse_entry(L)) == L
    """
    parts: list[str] = []

    if entry.done:
        parts.append("x ")
    if entry.priority is not None:
        parts.append(f"({entry.priority}) ")
    if entry.completion_date is not None:
        parts.append(f"{entry.completion_date} ")
    if entry.creation_date is not None:
        parts.append(f"{entry.creation_date} ")

    parts.append(entry.description)
    return "".join(parts)


# ---------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------

def render_tags(tags: Iterable[Tag]) -> str:
    """Render tags as their source words, space separated."""
    return " ".join(str(t) for t in tags)
