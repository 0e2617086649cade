# src/todoline/engine/validate.py

"""
Canonical-form checks for todo.txt lines.

A line is canonical when formatting its parsed entry reproduces it
exactly. Lines with irregular whitespace still parse, but would be
rewritten by a parse/format round trip; this module reports them.

It does NOT read files.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .parse import parse_entry
from .render import format_entry


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------

class ValidationError(Exception):
    """
    Fatal validation error used for command flow control.

    Raised when a command must abort immediately
    (e.g. a malformed record in structured input).
    """


# ---------------------------------------------------------------------
# Result objects
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """
    A single validation problem.

    `code` is a stable identifier suitable for tests and future filtering.
    """

    code: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Aggregated validation result for a single line.

    `line_no` is 1-based; 0 means the line was checked on its own.
    """

    line_no: int
    line: str
    issues: Sequence[ValidationIssue]

    @property
    def ok(self) -> bool:
        return not self.issues


# ---------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------

_LEADING_WS_RE = re.compile(r"\s", re.ASCII)
_BLANK_RE = re.compile(r"\s*", re.ASCII)


def is_blank(line: str) -> bool:
    """True if `line` holds nothing but ASCII whitespace."""
    return _BLANK_RE.fullmatch(line) is not None


def validate_line(line: str, *, line_no: int = 0) -> ValidationResult:
    """
    Check that `line` survives a parse/format round trip unchanged.
    """
    issues: list[ValidationIssue] = []

    if _LEADING_WS_RE.match(line):
        issues.append(
            ValidationIssue(
                code="leading_whitespace",
                message="Line starts with whitespace",
            )
        )

    canonical = format_entry(parse_entry(line))
    if canonical != line:
        issues.append(
            ValidationIssue(
                code="not_canonical",
                message=f"Line does not round-trip; canonical form is {canonical!r}",
            )
        )

    if issues:
        logger.debug("Line %d is not canonical: %r", line_no, line)

    return ValidationResult(line_no=line_no, line=line, issues=tuple(issues))


def validate_lines(lines: Iterable[str]) -> list[ValidationResult]:
    """
    Validate a sequence of lines, numbering them from 1.

    Blank lines are skipped (but still counted).
    """
    results: list[ValidationResult] = []
    for i, line in enumerate(lines, start=1):
        if is_blank(line):
            continue
        results.append(validate_line(line, line_no=i))
    return results
