# src/todoline/engine/tokens.py

"""
Word-level tokenizer for todo.txt lines.

An alternative to the single-pattern parser that reports each prefix
field as its own token, which is useful for step-by-step feedback.

Words are taken one at a time from the start of the line and classified
in grammar order (done, priority, up to two dates). A word only counts
as a prefix token when whitespace follows it. The first word that does
not classify starts the final Description token, which keeps the rest
of the line verbatim.

For every string s:

    entry_from_tokens(tokenize_line(s)) == parse_entry(s)
"""

import re
from dataclasses import dataclass
from typing import Iterable, Union

from .model import TodoEntry
from .parse import completion_and_creation_dates


_LEADING_WS_RE = re.compile(r"\s*", re.ASCII)
_WORD_RE = re.compile(r"(\S+)\s+", re.ASCII)
_PRIORITY_RE = re.compile(r"\(([A-Z])\)", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


# ---------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Done:
    """The `x` completion marker."""


@dataclass(frozen=True, slots=True)
class Priority:
    """A `(A)` priority marker; `letter` is the bare letter."""

    letter: str


@dataclass(frozen=True, slots=True)
class Date:
    """A YYYY-MM-DD word; its meaning depends on how many dates appear."""

    value: str


@dataclass(frozen=True, slots=True)
class Description:
    """The rest of the line, kept verbatim."""

    text: str


Token = Union[Done, Priority, Date, Description]


# Grammar stages: a token may only appear at or after its own stage.
_STAGE_DONE = 0
_STAGE_PRIORITY = 1
_STAGE_DATES = 2


# ---------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------

def tokenize_line(line: str) -> list[Token]:
    """
    Split a line into prefix tokens followed by one Description token.
    """
    tokens: list[Token] = []
    pos = _LEADING_WS_RE.match(line).end()
    stage = _STAGE_DONE
    dates = 0

    while True:
        m = _WORD_RE.match(line, pos)
        if m is None:
            break

        token = _classify(m.group(1), stage, dates)
        if token is None:
            break

        tokens.append(token)
        pos = m.end()

        if isinstance(token, Done):
            stage = _STAGE_PRIORITY
        else:
            stage = _STAGE_DATES
            if isinstance(token, Date):
                dates += 1

    tokens.append(Description(line[pos:]))
    return tokens


def _classify(word: str, stage: int, dates: int) -> Token | None:
    if stage == _STAGE_DONE and word == "x":
        return Done()

    if stage <= _STAGE_PRIORITY:
        p = _PRIORITY_RE.fullmatch(word)
        if p is not None:
            return Priority(p.group(1))

    if dates < 2 and _DATE_RE.fullmatch(word):
        return Date(word)

    return None


def entry_from_tokens(tokens: Iterable[Token]) -> TodoEntry:
    """
    Fold a token sequence into a TodoEntry.

    Dates follow the parser's rule: a lone date is the creation date,
    two dates are completion then creation.
    """
    done = False
    priority = None
    dates: list[str] = []
    description = ""

    for token in tokens:
        if isinstance(token, Done):
            done = True
        elif isinstance(token, Priority):
            priority = token.letter
        elif isinstance(token, Date):
            dates.append(token.value)
        elif isinstance(token, Description):
            description = token.text
        else:
            raise TypeError(f"Unknown token: {token!r}")

    if len(dates) > 2:
        raise ValueError(f"At most two dates are allowed, got {len(dates)}")

    completion_date, creation_date = completion_and_creation_dates(
        dates[0] if dates else None,
        dates[1] if len(dates) > 1 else None,
    )

    return TodoEntry(
        done=done,
        priority=priority,
        completion_date=completion_date,
        creation_date=creation_date,
        description=description,
    )
