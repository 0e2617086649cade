# src/todoline/engine/parse.py

"""
todo.txt line parser.

Parses a single line into an in-memory TodoEntry model.

Line grammar (every prefix field optional, each followed by whitespace):

    [x] [(A)] [YYYY-MM-DD] [YYYY-MM-DD] description

The description group accepts any remaining text, so the pattern matches
every input string. Date meaning is decided after matching:
one date is a creation date, two dates are completion then creation.

This module performs *structural* parsing only; tags inside the
description are handled by the tags module.
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, Optional

from .model import TodoEntry


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------

_DATE: Final[str] = r"\d{4}-\d{2}-\d{2}"

_ENTRY_RE = re.compile(
    r"\s*"
    r"(?:(?P<done>x)\s+)?"
    r"(?:\((?P<priority>[A-Z])\)\s+)?"
    rf"(?:(?P<first_date>{_DATE})\s+)?"
    rf"(?:(?P<second_date>{_DATE})\s+)?"
    r"(?P<description>.*)",
    re.ASCII | re.DOTALL,
)


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseError(Exception):
    """
    Raised when the entry pattern fails to match a line.

    The grammar matches every string, so this signals a broken
    matching engine rather than bad user input.
    """

    line: str
    message: str

    def __str__(self) -> str:
        return f"{self.line!r}: {self.message}"


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def parse_entry(line: str) -> TodoEntry:
    """
    Parse a todo.txt line into a TodoEntry.

    Leading whitespace is skipped. Irregular whitespace between prefix
    fields is accepted; the description is kept verbatim.
    """
    m = _ENTRY_RE.fullmatch(line)
    if m is None:
        logger.error("Entry pattern did not match line %r", line)
        raise ParseError(line, "entry pattern did not match")

    completion_date, creation_date = completion_and_creation_dates(
        m.group("first_date"),
        m.group("second_date"),
    )

    return TodoEntry(
        done=m.group("done") is not None,
        priority=m.group("priority"),
        completion_date=completion_date,
        creation_date=creation_date,
        description=m.group("description"),
    )


# ---------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------

def completion_and_creation_dates(
    first: Optional[str],
    second: Optional[str],
) -> tuple[Optional[str], Optional[str]]:
    """
    Map matched date slots to (completion_date, creation_date).

    A lone date is never a completion date.
    """
    if first is None:
        return None, None
    if second is None:
        return None, first
    return first, second
