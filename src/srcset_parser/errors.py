"""Exceptions raised while parsing ``srcset`` attribute values."""
from __future__ import annotations

__all__ = [
    "EmptyCandidateSetError",
    "InvalidDescriptorError",
    "SrcsetParseError",
]


class SrcsetParseError(ValueError):
    """Base class for failures that invalidate a whole ``srcset`` value."""

    kind = "srcset_parse_error"


class EmptyCandidateSetError(SrcsetParseError):
    """The value contains no image candidate strings."""

    kind = "empty_candidate_set"

    def __init__(self, text: str) -> None:
        super().__init__("Must contain one or more image candidate strings.")
        self.text = text


class InvalidDescriptorError(SrcsetParseError):
    """A descriptor failed classification or a mutual-exclusion rule."""

    kind = "invalid_descriptor"

    def __init__(self, text: str, descriptor: str) -> None:
        super().__init__(f'Invalid srcset descriptor found in "{text}" at "{descriptor}".')
        self.text = text
        self.descriptor = descriptor
