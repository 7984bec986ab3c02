"""Parse ``srcset`` attribute values into image candidates.

The splitting loop follows the HTML "parse a srcset attribute" algorithm:
separator runs are skipped, the next run of non-whitespace characters becomes
the candidate URL, and the characters after it are handed to the descriptor
tokenizer. Unlike the reference algorithm, which drops candidates with bad
descriptors, a single invalid descriptor rejects the whole value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..errors import EmptyCandidateSetError
from .descriptors import parse_descriptors, tokenize_descriptors
from .scanning import SEPARATORS, collect_characters, collect_non_whitespace

__all__ = ["Candidate", "ImageSource", "parse", "parse_srcset"]


@dataclass(frozen=True)
class ImageSource:
    """URL of a candidate and the offset where it starts in the attribute value."""

    value: str
    start: int


@dataclass(frozen=True)
class Candidate:
    """Image candidate string parsed from a ``srcset`` value."""

    source: ImageSource
    width: Optional[int] = None
    density: Optional[float] = None
    height: Optional[int] = None

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "source": {"value": self.source.value, "startOffset": self.source.start},
        }
        if self.width is not None:
            payload["width"] = {"value": self.width}
        if self.density is not None:
            payload["density"] = {"value": self.density}
        if self.height is not None:
            payload["height"] = {"value": self.height}
        return payload


def parse_srcset(text: str) -> List[Candidate]:
    """Return the image candidates declared by the ``srcset`` value ``text``.

    Raises :class:`~srcset_parser.errors.EmptyCandidateSetError` when ``text``
    holds only separators and
    :class:`~srcset_parser.errors.InvalidDescriptorError` on the first
    descriptor that fails validation.
    """

    candidates: List[Candidate] = []
    length = len(text)
    position = 0

    while True:
        _, position = collect_characters(text, position, SEPARATORS)
        if position >= length:
            if not candidates:
                raise EmptyCandidateSetError(text)
            return candidates

        start, position = collect_non_whitespace(text, position)
        url = text[start:position]

        if url.endswith(","):
            # Trailing commas end the candidate; it has no descriptors.
            url = url.rstrip(",")
            descriptors: List[str] = []
        else:
            descriptors, position = tokenize_descriptors(text, position)

        sizes = parse_descriptors(text, descriptors)
        candidates.append(
            Candidate(
                source=ImageSource(value=url, start=start),
                width=sizes.width,
                density=sizes.density,
                height=sizes.height,
            )
        )


parse = parse_srcset
