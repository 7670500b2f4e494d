from typing import List, Sequence

from hockey_pool.models.standings import Cell, StandingsTable

LEADING_COLUMNS = 2  # participant, top-K total


def build_header(
    max_entities: int,
    top_k: int,
    participant_label: str = "Participant",
    entity_label: str = "Entity",
) -> List[str]:
    return [participant_label, f"Top {top_k} Total"] + [
        f"{entity_label} {index}" for index in range(1, max_entities + 1)
    ]


def shape_standings(
    rows: Sequence[Sequence[Cell]],
    top_k: int,
    participant_label: str = "Participant",
    entity_label: str = "Entity",
) -> StandingsTable:
    """Pads rows to a common width and synthesizes the header.

    With no rows the result is a header-only table; sinks are expected to
    write a placeholder for it instead.
    """
    max_entities = max((len(row) - LEADING_COLUMNS for row in rows), default=0)
    width = max_entities + LEADING_COLUMNS

    padded = [list(row) + [""] * (width - len(row)) for row in rows]
    header = build_header(max_entities, top_k, participant_label, entity_label)
    return StandingsTable(header=header, rows=padded)
