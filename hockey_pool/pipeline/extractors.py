import math
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from hockey_pool.models.roster import RosterRow

Row = Sequence[str]

_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_LITERAL_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def looks_numeric(cell: Optional[str]) -> bool:
    """Heuristic for the optional points column of team rosters.

    Follows numeric-string conversion rules: an empty cell counts as numeric
    (an unfilled points column), so do ``Infinity`` and unsigned hex, octal
    and binary literals. NaN, ``inf`` and digit separators do not. Roster
    files come in both shapes, so this stays a guess rather than a schema.
    """
    if cell is None:
        return False
    text = str(cell).strip()
    if text == "":
        return True
    if _INFINITY_RE.fullmatch(text) or _RADIX_LITERAL_RE.fullmatch(text):
        return True
    if "_" in text:
        return False
    try:
        value = float(text)
    except ValueError:
        return False
    return math.isfinite(value)


class RosterExtractor(ABC):
    """Pulls (participant, entity) pairs out of parsed roster rows."""

    header_keywords: Tuple[str, ...] = ()
    header_match_contains: bool = False

    def is_header(self, row: Row) -> bool:
        """True when row 0, column 0 looks like a header cell.

        Known limitation: a data row whose first cell happens to contain the
        keyword is taken for a header and skipped.
        """
        if not row or not row[0]:
            return False
        first_cell = str(row[0]).strip().lower()
        if first_cell in self.header_keywords:
            return True
        if self.header_match_contains:
            return any(keyword in first_cell for keyword in self.header_keywords)
        return False

    @abstractmethod
    def split_row(self, row: Row) -> Optional[Tuple[str, str]]:
        """Returns (participant, entity) for one row, or None to skip it."""
        pass

    def extract(self, rows: Sequence[Row]) -> List[RosterRow]:
        start_row = 1 if rows and self.is_header(rows[0]) else 0
        logger.info(f"Processing {len(rows) - start_row} roster entries")

        roster: List[RosterRow] = []
        for row in rows[start_row:]:
            pair = self.split_row(row)
            if pair is None:
                continue
            participant, entity = (str(value).strip() for value in pair)
            if not participant or not entity:
                continue
            roster.append(RosterRow(participant=participant, entity=entity))
        return roster


class SkaterRosterExtractor(RosterExtractor):
    """Column 0 is the participant, column 1 the skater."""

    header_keywords = ("player",)
    header_match_contains = True

    def split_row(self, row: Row) -> Optional[Tuple[str, str]]:
        if len(row) < 2:
            return None
        return row[0], row[1]


class TeamRosterExtractor(RosterExtractor):
    """Column 0 is the team; the participant is in column 1, or column 2 when
    column 1 holds a points value."""

    header_keywords = ("team", "team name")
    header_match_contains = False

    def split_row(self, row: Row) -> Optional[Tuple[str, str]]:
        if len(row) >= 3 and looks_numeric(row[1]):
            return row[2], row[0]
        if len(row) >= 2:
            return row[1], row[0]
        return None
