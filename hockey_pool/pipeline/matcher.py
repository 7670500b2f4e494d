from typing import Dict, List, Mapping, Sequence

from loguru import logger

from hockey_pool.models.roster import MatchRecord, RosterRow, Score, UnmatchedRecord
from hockey_pool.models.standings import MatchReport
from hockey_pool.normalization.normalizer import NameNormalizer


def match_roster(
    roster: Sequence[RosterRow],
    scores: Mapping[str, Score],
    normalizer: NameNormalizer,
) -> MatchReport:
    """Joins roster entities against the score mapping.

    Participants keep the order in which the roster first lists them, so ties
    in the standings fall back to roster order. Participants without any
    match are dropped and never reach the standings. Every miss is kept as an
    UnmatchedRecord.
    """
    # Key: participant in first-seen roster order, Value: their matches
    grouped: Dict[str, List[MatchRecord]] = {}
    unmatched: List[UnmatchedRecord] = []

    for row in roster:
        records = grouped.setdefault(row.participant, [])
        normalized = normalizer.normalize(row.entity)

        if normalized is not None and normalized in scores:
            score = scores[normalized]
            records.append(
                MatchRecord(
                    canonical_name=normalized,
                    original_name=row.entity,
                    score=score,
                )
            )
            logger.debug(
                f"Matched: '{row.entity}' => '{normalized}' ({score}) for {row.participant}"
            )
        else:
            unmatched.append(
                UnmatchedRecord(
                    participant=row.participant,
                    original_name=row.entity,
                    normalized=normalized,
                )
            )
            logger.warning(
                f"{normalizer.label.capitalize()} '{row.entity}' for '{row.participant}' "
                f"not found in NHL data (normalized: '{normalized}')"
            )

    matches_by_participant = {
        participant: records for participant, records in grouped.items() if records
    }
    logger.info(
        f"Found {len(matches_by_participant)} participants with matches, "
        f"{len(unmatched)} unmatched entries"
    )
    return MatchReport(
        matches_by_participant=matches_by_participant, unmatched=unmatched
    )


def fill_missing_scores(
    entities: Sequence[str],
    scores: Mapping[str, Score],
    normalizer: NameNormalizer,
) -> Dict[str, Score]:
    """Copy of ``scores`` where drafted names known to the alias table default to 0.

    A leaders feed only lists players who have scored, so a drafted skater
    without a goal would otherwise show up as unmatched. Names the alias
    table does not know are left out and still surface as unmatched.
    """
    filled: Dict[str, Score] = dict(scores)
    for entity in entities:
        canonical = normalizer.resolve(entity)
        if canonical is not None and canonical not in filled:
            logger.warning(f"'{entity}' (normalized: '{canonical}') not in NHL data, counting 0")
            filled[canonical] = 0
    return filled
