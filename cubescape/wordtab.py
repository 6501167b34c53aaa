"""Small string helpers: word splitting and substring search."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(text) if word]


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of needle within the first limit characters, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return text.find(needle, 0, limit)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like find, but skip matches that lie inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    text = text[:limit]
    last_start = len(text) - len(needle)
    quoted = False
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1