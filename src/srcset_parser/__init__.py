"""WHATWG srcset attribute parser."""

from ._version import __version__
from .errors import EmptyCandidateSetError, InvalidDescriptorError, SrcsetParseError
from .parsers.srcset import Candidate, ImageSource, parse, parse_srcset

__all__ = [
    "__version__",
    "Candidate",
    "ImageSource",
    "EmptyCandidateSetError",
    "InvalidDescriptorError",
    "SrcsetParseError",
    "parse",
    "parse_srcset",
]
