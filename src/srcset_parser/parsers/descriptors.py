"""Tokenize and validate the descriptors that follow a srcset candidate URL."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..errors import InvalidDescriptorError
from .scanning import ASCII_WHITESPACE, collect_characters, is_ascii_whitespace

__all__ = [
    "DescriptorSizes",
    "parse_descriptors",
    "parse_floating_point",
    "parse_non_negative_integer",
    "tokenize_descriptors",
]

# Digits are ASCII only; ``\d`` would also accept other Unicode decimal digits.
_NON_NEGATIVE_INTEGER = re.compile(r"[0-9]+")
# Optional leading minus, no leading plus, a digit required after any decimal point.
_FLOATING_POINT = re.compile(r"-?(?:[0-9]+|[0-9]*\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_WIDTH_UNIT = "w"
_DENSITY_UNIT = "x"
_HEIGHT_UNIT = "h"


class _State(Enum):
    IN_DESCRIPTOR = "in descriptor"
    IN_PARENS = "in parens"
    AFTER_DESCRIPTOR = "after descriptor"


@dataclass(frozen=True)
class DescriptorSizes:
    """Validated sizes collected from the descriptors of one candidate."""

    width: Optional[int] = None
    density: Optional[float] = None
    height: Optional[int] = None


def tokenize_descriptors(text: str, position: int) -> Tuple[List[str], int]:
    """Split the descriptors starting at ``position`` in ``text``.

    Returns the descriptor strings and the position where the splitting loop
    should resume. Inside a parenthesised group whitespace and commas are plain
    characters; an unterminated group is pushed as is when the input ends.
    """

    _, position = collect_characters(text, position, ASCII_WHITESPACE)
    length = len(text)

    descriptors: List[str] = []
    current = ""
    state = _State.IN_DESCRIPTOR

    while True:
        char = text[position] if position < length else None

        if state is _State.IN_DESCRIPTOR:
            if char is None:
                if current:
                    descriptors.append(current)
                return descriptors, position
            if is_ascii_whitespace(char):
                if current:
                    descriptors.append(current)
                    current = ""
                    state = _State.AFTER_DESCRIPTOR
            elif char == ",":
                position += 1
                if current:
                    descriptors.append(current)
                return descriptors, position
            elif char == "(":
                current += char
                state = _State.IN_PARENS
            else:
                current += char

        elif state is _State.IN_PARENS:
            if char is None:
                descriptors.append(current)
                return descriptors, position
            current += char
            if char == ")":
                state = _State.IN_DESCRIPTOR

        else:
            if char is None:
                return descriptors, position
            if not is_ascii_whitespace(char):
                state = _State.IN_DESCRIPTOR
                # Reprocess this character as the start of the next descriptor.
                position -= 1

        position += 1


def parse_non_negative_integer(raw: str) -> Optional[int]:
    """Return the value of ``raw`` if it is a valid non-negative integer."""

    if not _NON_NEGATIVE_INTEGER.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit.
        return None


def parse_floating_point(raw: str) -> Optional[float]:
    """Return the value of ``raw`` if it is a valid floating-point number."""

    if not _FLOATING_POINT.fullmatch(raw):
        return None
    return float(raw)


def parse_descriptors(text: str, descriptors: Sequence[str]) -> DescriptorSizes:
    """Validate ``descriptors`` and return the sizes they declare.

    ``text`` is the whole attribute value and only feeds the error message.
    The first descriptor that is malformed, zero-sized, negative, or clashes
    with a descriptor already seen raises :class:`InvalidDescriptorError`.
    """

    width: Optional[int] = None
    density: Optional[float] = None
    height: Optional[int] = None

    for descriptor in descriptors:
        value, unit = descriptor[:-1], descriptor[-1:]

        if unit == _WIDTH_UNIT and (integer := parse_non_negative_integer(value)) is not None:
            if width is not None or density is not None or integer == 0:
                raise InvalidDescriptorError(text, descriptor)
            width = integer
        elif unit == _DENSITY_UNIT and (number := parse_floating_point(value)) is not None:
            if width is not None or density is not None or height is not None:
                raise InvalidDescriptorError(text, descriptor)
            if number < 0 or not math.isfinite(number):
                raise InvalidDescriptorError(text, descriptor)
            # "-0" is a valid density and is reported as positive zero.
            density = 0.0 if number == 0 else number
        elif unit == _HEIGHT_UNIT and (integer := parse_non_negative_integer(value)) is not None:
            if height is not None or density is not None or integer == 0:
                raise InvalidDescriptorError(text, descriptor)
            height = integer
        else:
            raise InvalidDescriptorError(text, descriptor)

    return DescriptorSizes(width=width, density=density, height=height)
