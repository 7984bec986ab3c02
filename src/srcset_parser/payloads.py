"""Pydantic models describing the JSON shape of parsed candidates."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .parsers.srcset import Candidate

__all__ = [
    "CandidatePayload",
    "DensityPayload",
    "HeightPayload",
    "SourcePayload",
    "WidthPayload",
    "dump_candidates",
]


class SourcePayload(BaseModel):
    """URL of a candidate and its offset in the attribute value."""

    value: str
    start_offset: int = Field(..., alias="startOffset", ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class WidthPayload(BaseModel):
    value: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class DensityPayload(BaseModel):
    value: float = Field(..., ge=0.0, allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


class HeightPayload(BaseModel):
    value: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)


class CandidatePayload(BaseModel):
    """Serialisable form of :class:`~srcset_parser.parsers.srcset.Candidate`."""

    source: SourcePayload
    width: WidthPayload | None = None
    density: DensityPayload | None = None
    height: HeightPayload | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _exclusive_descriptors(self) -> "CandidatePayload":
        if self.density is not None and self.width is not None:
            raise ValueError("width and density descriptors are mutually exclusive")
        if self.density is not None and self.height is not None:
            raise ValueError("height and density descriptors are mutually exclusive")
        return self

    @classmethod
    def from_candidate(cls, candidate: Candidate) -> "CandidatePayload":
        return cls.model_validate(candidate.as_dict())

    def as_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def dump_candidates(candidates: Iterable[Candidate]) -> List[Dict[str, Any]]:
    """Validate ``candidates`` and return them as JSON-ready dictionaries."""

    return [CandidatePayload.from_candidate(candidate).as_json_dict() for candidate in candidates]
