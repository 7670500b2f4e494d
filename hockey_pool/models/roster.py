# hockey_pool/models/roster.py
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Score = Union[int, float]


class RosterRow(BaseModel):
    """One drafted entity for one pool participant, as read from the roster CSV."""

    model_config = ConfigDict(frozen=True)

    participant: str = Field(..., min_length=1)
    entity: str = Field(..., min_length=1)

    @field_validator("participant", "entity", mode="before")
    @classmethod
    def _strip(cls, value: str) -> str:
        return value.strip() if isinstance(value, str) else value


class MatchRecord(BaseModel):
    """A roster entity resolved to a scored canonical name."""

    model_config = ConfigDict(frozen=True)

    canonical_name: str
    original_name: str  # Spelling used in the roster, kept for reference
    score: Score

    @field_validator("score")
    @classmethod
    def _non_negative(cls, value: Score) -> Score:
        if value < 0:
            raise ValueError("score must be non-negative")
        return value

    @property
    def label(self) -> str:
        return f"{self.canonical_name}: {format_score(self.score)}"


class UnmatchedRecord(BaseModel):
    """A roster entity that could not be resolved to a scored canonical name."""

    model_config = ConfigDict(frozen=True)

    participant: str
    original_name: str
    normalized: Optional[str] = None  # Normalization attempt, None when it failed


def format_score(score: Score) -> str:
    """Renders a score without a trailing '.0' for integral floats."""
    if isinstance(score, float) and score.is_integer():
        return str(int(score))
    return str(score)
