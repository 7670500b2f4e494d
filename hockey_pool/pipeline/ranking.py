from typing import List, Mapping, Sequence

from loguru import logger

from hockey_pool.models.roster import MatchRecord
from hockey_pool.models.standings import Cell, ParticipantStanding


def rank_participants(
    matches_by_participant: Mapping[str, Sequence[MatchRecord]], top_k: int
) -> List[ParticipantStanding]:
    """Ranks participants by the sum of their ``top_k`` best scores.

    Both sorts are stable: equal scores keep roster order within a
    participant, and equal totals keep participant encounter order.
    """
    standings: List[ParticipantStanding] = []
    for participant, matches in matches_by_participant.items():
        if not matches:
            continue
        ordered = sorted(matches, key=lambda match: match.score, reverse=True)
        standings.append(
            ParticipantStanding(participant=participant, matches=ordered, top_k=top_k)
        )

    standings.sort(key=lambda standing: standing.top_k_total, reverse=True)
    logger.debug(f"Ranked {len(standings)} participants on top {top_k} totals")
    return standings


def standings_rows(standings: Sequence[ParticipantStanding]) -> List[List[Cell]]:
    """Unpadded, unheadered rows in ranking order."""
    return [standing.to_row() for standing in standings]
