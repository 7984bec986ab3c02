"""Character classes and span collection shared by the srcset scanners."""
from __future__ import annotations

from typing import FrozenSet, Tuple

__all__ = [
    "ASCII_WHITESPACE",
    "SEPARATORS",
    "collect_characters",
    "collect_non_whitespace",
    "is_ascii_whitespace",
]

# U+0009 TAB, U+000A LF, U+000C FF, U+000D CR, U+0020 SPACE. U+000B and U+00A0 are not members.
ASCII_WHITESPACE: FrozenSet[str] = frozenset("\t\n\x0c\r ")
SEPARATORS: FrozenSet[str] = ASCII_WHITESPACE | {","}


def is_ascii_whitespace(char: str) -> bool:
    return char in ASCII_WHITESPACE


def collect_characters(text: str, position: int, charset: FrozenSet[str]) -> Tuple[int, int]:
    """Return the ``(start, end)`` span of the run of ``charset`` members at ``position``.

    The span is empty (``start == end``) when the character at ``position`` is
    not a member or ``position`` is at or past the end of ``text``.
    """

    end = position
    length = len(text)
    while end < length and text[end] in charset:
        end += 1
    return position, end


def collect_non_whitespace(text: str, position: int) -> Tuple[int, int]:
    """Return the span of the run of characters that are not ASCII whitespace."""

    end = position
    length = len(text)
    while end < length and text[end] not in ASCII_WHITESPACE:
        end += 1
    return position, end
