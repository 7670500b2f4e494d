from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import PoolKind
from .roster import MatchRecord, Score, UnmatchedRecord

Cell = Union[str, int, float]


class ParticipantStanding(BaseModel):
    """A participant's matches in ranking order and their top-K total."""

    model_config = ConfigDict(frozen=True)

    participant: str
    matches: List[MatchRecord]  # Score descending, ties in roster order
    top_k: int = Field(..., gt=0)

    @computed_field  # type: ignore[misc]
    @property
    def top_k_total(self) -> Score:
        return sum(match.score for match in self.matches[: self.top_k])

    def to_row(self) -> List[Cell]:
        """[participant, topKTotal, "name: score", ...] with every match, not just the top K."""
        return [self.participant, self.top_k_total] + [
            match.label for match in self.matches
        ]


class MatchReport(BaseModel):
    """Matches grouped by participant (first-encounter order) plus the misses."""

    matches_by_participant: Dict[str, List[MatchRecord]] = {}
    unmatched: List[UnmatchedRecord] = []

    @property
    def match_count(self) -> int:
        return sum(len(matches) for matches in self.matches_by_participant.values())


class StandingsTable(BaseModel):
    """Header row plus rectangular data rows, ready for a sink."""

    model_config = ConfigDict(frozen=True)

    header: List[str]
    rows: List[List[Cell]] = []

    @property
    def has_data(self) -> bool:
        return bool(self.rows)

    def as_rows(self) -> List[List[Cell]]:
        """The header-inclusive table."""
        return [list(self.header)] + [list(row) for row in self.rows]


class PoolResult(BaseModel):
    """Outcome of one pipeline run: the shaped table plus diagnostics."""

    kind: PoolKind
    table: StandingsTable
    unmatched: List[UnmatchedRecord] = []

    @property
    def has_data(self) -> bool:
        return self.table.has_data
