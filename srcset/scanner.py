"""Character-class scanning primitives shared by the srcset parser."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Pattern

SPACE_CHARS = " \t\n\f\r"

LEADING_SPACES = re.compile(r"[ \t\n\f\r]+")
LEADING_COMMAS_OR_SPACES = re.compile(r"[, \t\n\f\r]+")
LEADING_NOT_SPACES = re.compile(r"[^ \t\n\f\r]+")
TRAILING_COMMAS = re.compile(r",+\Z")
NON_NEGATIVE_INTEGER = re.compile(r"[0-9]+")
FLOATING_POINT = re.compile(r"-?(?:[0-9]+|[0-9]*\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass
class Cursor:
    """Read position over a single srcset value."""

    text: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        if self.at_end:
            return None
        return self.text[self.pos]


def collect(cursor: Cursor, pattern: Pattern[str]) -> str:
    """Consume the run matching ``pattern`` at the cursor and return it."""
    match = pattern.match(cursor.text, cursor.pos)
    if not match:
        return ""
    cursor.pos = match.end()
    return match.group(0)


def matches(text: str, pattern: Pattern[str]) -> bool:
    """Return True when ``pattern`` covers the whole of ``text``."""
    return pattern.fullmatch(text) is not None


def is_space(char: str) -> bool:
    return char != "" and char in SPACE_CHARS


def strip_trailing_commas(token: str) -> str:
    return TRAILING_COMMAS.sub("", token)
