import re
from typing import List, Sequence

from loguru import logger

DELIMITER = ","
_LINE_BREAK = re.compile(r"\r?\n")


def parse_csv_content(csv_content: str) -> List[List[str]]:
    """Parses raw roster text into rows of trimmed cells.

    Blank lines are dropped, so row indices do not line up with line numbers.
    There is no quoting support: a comma inside a quoted field splits the field.
    Rosters are plain name lists, so this limitation is kept as-is.
    """
    rows: List[List[str]] = []
    for line in _LINE_BREAK.split(csv_content or ""):
        line = line.strip()
        if not line:
            continue
        rows.append([cell.strip() for cell in line.split(DELIMITER)])

    logger.debug(f"Parsed {len(rows)} rows from CSV content")
    return rows


def serialize_rows(rows: Sequence[Sequence[object]]) -> str:
    """Inverse of parse_csv_content for delimiter-free cells."""
    return "\n".join(DELIMITER.join(str(cell) for cell in row) for row in rows)
