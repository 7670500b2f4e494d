from typing import List, Mapping, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from hockey_pool.models.enums import PoolKind
from hockey_pool.models.roster import Score
from hockey_pool.models.standings import PoolResult
from hockey_pool.normalization.normalizer import (
    NameNormalizer,
    TeamNameNormalizer,
    skater_normalizer,
)
from hockey_pool.parsing.csv_parser import parse_csv_content
from hockey_pool.pipeline.extractors import (
    RosterExtractor,
    SkaterRosterExtractor,
    TeamRosterExtractor,
)
from hockey_pool.pipeline.matcher import match_roster
from hockey_pool.pipeline.output import shape_standings
from hockey_pool.pipeline.ranking import rank_participants, standings_rows


class InputMalformedError(Exception):
    """Raised when the roster source is empty or could not be parsed."""

    pass


class PoolConfig(BaseModel):
    """Everything that differs between the skater and team pools."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: PoolKind
    normalizer: NameNormalizer
    extractor: RosterExtractor
    top_k: int = Field(..., gt=0)
    entity_label: str
    participant_label: str = "Participant"
    score_label: str = "score"


def skater_pool_config() -> PoolConfig:
    return PoolConfig(
        kind=PoolKind.SKATERS,
        normalizer=skater_normalizer(),
        extractor=SkaterRosterExtractor(),
        top_k=4,
        entity_label="Skater",
        score_label="goals",
    )


def team_pool_config() -> PoolConfig:
    return PoolConfig(
        kind=PoolKind.TEAMS,
        normalizer=TeamNameNormalizer(),
        extractor=TeamRosterExtractor(),
        top_k=3,
        entity_label="Team",
        score_label="points",
    )


class PoolPipeline:
    """Roster rows + score mapping -> shaped standings table and diagnostics."""

    def __init__(self, config: PoolConfig):
        self.config = config

    def run(
        self, rows: Optional[Sequence[Sequence[str]]], scores: Mapping[str, Score]
    ) -> PoolResult:
        """Runs the pool on already-parsed rows.

        Raises:
            InputMalformedError: if there are no rows at all.
        """
        config = self.config
        if not rows:
            raise InputMalformedError("CSV file is empty or could not be parsed")

        logger.info(
            f"Calculating {config.kind.value} pool standings from {len(rows)} rows "
            f"against {len(scores)} scored names"
        )
        roster = config.extractor.extract(rows)
        report = match_roster(roster, scores, config.normalizer)
        standings = rank_participants(report.matches_by_participant, config.top_k)
        table = shape_standings(
            standings_rows(standings),
            config.top_k,
            participant_label=config.participant_label,
            entity_label=config.entity_label,
        )

        if table.has_data:
            logger.info(
                f"{config.kind.value.capitalize()} pool standings built with {len(table.rows)} participants"
            )
        else:
            logger.warning(f"No {config.kind.value} pool data found to calculate standings")

        return PoolResult(kind=config.kind, table=table, unmatched=report.unmatched)

    def run_csv(self, csv_content: Optional[str], scores: Mapping[str, Score]) -> PoolResult:
        """Parses raw roster text, then runs the pool."""
        return self.run(parse_csv_content(csv_content or ""), scores)

    def roster_entities(self, rows: Sequence[Sequence[str]]) -> List[str]:
        """Entity names in roster order, e.g. to decide which scores to fetch."""
        return [row.entity for row in self.config.extractor.extract(rows)]
