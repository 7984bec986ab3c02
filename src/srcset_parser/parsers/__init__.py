"""Parser primitives for ``srcset`` attribute values."""

from .descriptors import DescriptorSizes, parse_descriptors, tokenize_descriptors
from .scanning import collect_characters, collect_non_whitespace, is_ascii_whitespace
from .srcset import Candidate, ImageSource, parse, parse_srcset

__all__ = [
    "Candidate",
    "DescriptorSizes",
    "ImageSource",
    "collect_characters",
    "collect_non_whitespace",
    "is_ascii_whitespace",
    "parse",
    "parse_descriptors",
    "parse_srcset",
    "tokenize_descriptors",
]
