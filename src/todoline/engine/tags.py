# src/todoline/engine/tags.py

"""
Tag extraction from task descriptions.

Words are separated by runs of ASCII whitespace and classified with
first-match-wins precedence:

    +name      -> Project
    @name      -> Context
    key:value  -> KeyValue (split at the first colon)

Anything else is plain text and produces no tag.
"""

import re

from .model import Context, KeyValue, Project, Tag


_WORD_RE = re.compile(r"\S+", re.ASCII)


def extract_tags(description: str) -> list[Tag]:
    """
    Return the tags in `description`, in order of appearance.

    The description is not modified. A bare `+` or `@` yields an empty
    name; `key:` yields an empty value.
    """
    tags: list[Tag] = []

    for word in _WORD_RE.findall(description):
        tag = _classify(word)
        if tag is not None:
            tags.append(tag)

    return tags


def _classify(word: str) -> Tag | None:
    # Prefix checks come before the colon check: `+a:b` is a project.
    if word.startswith("+"):
        return Project(word[1:])
    if word.startswith("@"):
        return Context(word[1:])
    if ":" in word:
        key, value = word.split(":", 1)
        return KeyValue(key, value)
    return None
