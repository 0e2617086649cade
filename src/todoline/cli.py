# src/todoline/cli.py

"""
Command-line interface for todoline.

This module:
- defines argument parsing and subcommands,
- reads todo.txt lines from files or stdin,
- delegates parsing, formatting and tagging to engine modules.

KISS rule: keep commands small and predictable.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml

from todoline.engine.model import TodoEntry
from todoline.engine.parse import parse_entry
from todoline.engine.render import format_entry, render_tags
from todoline.engine.tokens import tokenize_line
from todoline.engine.validate import ValidationError, is_blank, validate_lines
from todoline.logging_setup import setup_logging


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todoline")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors",
    )
    sub = parser.add_subparsers(dest="command")

    p_parse = sub.add_parser(
        "parse",
        help="Parse todo.txt lines into YAML records",
    )
    _add_files_argument(p_parse)
    p_parse.add_argument(
        "--no-tags",
        action="store_true",
        help="Do not include extracted tags in the records",
    )
    p_parse.set_defaults(func=cmd_parse)

    p_format = sub.add_parser(
        "format",
        help="Format YAML records back into todo.txt lines",
    )
    p_format.add_argument(
        "file",
        nargs="?",
        default="-",
        help="YAML file with a list of records (default: stdin)",
    )
    p_format.set_defaults(func=cmd_format)

    p_tags = sub.add_parser(
        "tags",
        help="Print the tags of each line",
    )
    _add_files_argument(p_tags)
    p_tags.set_defaults(func=cmd_tags)

    p_tokens = sub.add_parser(
        "tokens",
        help="Print the prefix tokens of each line",
    )
    _add_files_argument(p_tokens)
    p_tokens.set_defaults(func=cmd_tokens)

    p_check = sub.add_parser(
        "check",
        help="Report lines that are not in canonical form",
    )
    _add_files_argument(p_check)
    p_check.set_defaults(func=cmd_check)

    return parser


def _add_files_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "files",
        nargs="*",
        default=["-"],
        help="todo.txt files to read ('-' for stdin, the default)",
    )


# ---------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------

def _read_text(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def _split_lines(text: str) -> list[str]:
    """Split on newlines only; descriptions may hold other control chars."""
    lines = text.split("\n")
    # A final newline terminates the last line; it does not start a new one.
    if lines[-1] == "":
        lines.pop()
    return [ln.rstrip("\r") for ln in lines]


def _iter_lines(names: Iterable[str], *, keep_blank: bool = False) -> Iterator[str]:
    """
    Yield lines from every input, in order.

    Blank lines are dropped unless `keep_blank` is set
    (the check command needs them for line numbers).
    """
    for name in names:
        count = 0
        for line in _split_lines(_read_text(name)):
            if not keep_blank and is_blank(line):
                continue
            count += 1
            yield line
        logger.debug("Read %d line(s) from %s", count, name)


def _record(entry: TodoEntry, *, with_tags: bool) -> dict[str, Any]:
    data = entry.to_dict()
    if with_tags:
        data["tags"] = [t.to_dict() for t in entry.tags()]
    return data


def _load_records(name: str) -> list[TodoEntry]:
    data = yaml.safe_load(_read_text(name))
    if data is None:
        return []

    if not isinstance(data, list):
        raise ValidationError(f"{name}: YAML root must be a list of records")

    entries: list[TodoEntry] = []
    for i, item in enumerate(data, start=1):
        try:
            entries.append(TodoEntry.from_dict(item))
        except ValueError as e:
            raise ValidationError(f"{name}: record {i}: {e}") from e
    return entries


# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------

def cmd_parse(args: argparse.Namespace) -> int:
    with_tags = not bool(args.no_tags)
    records = [
        _record(parse_entry(line), with_tags=with_tags)
        for line in _iter_lines(args.files)
    ]

    if records:
        sys.stdout.write(yaml.safe_dump(records, sort_keys=False, allow_unicode=True))
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    for entry in _load_records(args.file):
        print(format_entry(entry))
    return 0


def cmd_tags(args: argparse.Namespace) -> int:
    for line in _iter_lines(args.files):
        print(render_tags(parse_entry(line).tags()))
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    for line in _iter_lines(args.files):
        print(" | ".join(repr(t) for t in tokenize_line(line)))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    had_errors = False

    for res in validate_lines(_iter_lines(args.files, keep_blank=True)):
        if res.ok:
            continue

        had_errors = True
        print(f"line {res.line_no}: {res.line!r}")
        for issue in res.issues:
            print(f"  - {issue.code}: {issue.message}")

    return 1 if had_errors else 0


# ---------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    setup_logging(level)

    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        return 2

    try:
        return func(args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except yaml.YAMLError as e:
        print(f"Error: invalid YAML: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
