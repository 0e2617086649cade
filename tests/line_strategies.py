"""Hypothesis strategies for todo.txt lines."""

import re
import string

from hypothesis import strategies as st

from todoline.engine.model import TodoEntry


_PREFIX_WORD_RE = re.compile(r"x|\([A-Z]\)|\d{4}-\d{2}-\d{2}", re.ASCII)

_WORD_CHARS = string.ascii_letters + string.digits + "+@:-_()."

dates = st.from_regex(r"[0-9]{4}-[0-9]{2}-[0-9]{2}", fullmatch=True)
priorities = st.sampled_from(string.ascii_uppercase)
words = st.text(alphabet=_WORD_CHARS, min_size=1, max_size=10)


def _is_prefix_word(word: str) -> bool:
    return _PREFIX_WORD_RE.fullmatch(word) is not None


@st.composite
def canonical_lines(draw) -> tuple[str, TodoEntry]:
    """
    Draw a canonical line together with the entry it must parse to.

    The first description word never looks like a prefix field,
    otherwise the parser would (correctly) consume it.
    """
    done = draw(st.booleans())
    priority = draw(st.none() | priorities)
    date_list = draw(st.lists(dates, max_size=2))
    desc_words = draw(st.lists(words, max_size=6))
    if desc_words and _is_prefix_word(desc_words[0]):
        desc_words[0] = "task" + desc_words[0]

    description = " ".join(desc_words)

    parts: list[str] = []
    if done:
        parts.append("x")
    if priority is not None:
        parts.append(f"({priority})")
    parts.extend(date_list)
    line = "".join(p + " " for p in parts) + description

    if len(date_list) == 2:
        completion_date, creation_date = date_list
    elif date_list:
        completion_date, creation_date = None, date_list[0]
    else:
        completion_date, creation_date = None, None

    entry = TodoEntry(
        done=done,
        priority=priority,
        completion_date=completion_date,
        creation_date=creation_date,
        description=description,
    )
    return line, entry
