# hockey_pool/storage/csv_sink.py
import csv
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from loguru import logger

from hockey_pool.config.settings import settings
from hockey_pool.models.enums import PoolKind
from hockey_pool.models.roster import UnmatchedRecord
from hockey_pool.models.standings import PoolResult

NO_DATA_MESSAGE = "No player data found"

STANDINGS_FILENAMES: Dict[PoolKind, str] = {
    PoolKind.SKATERS: "player_pool_standings.csv",
    PoolKind.TEAMS: "team_pool_standings.csv",
}
SNAPSHOT_FILENAME = "team_api_standings.csv"


def _write_rows_atomic(path: Path, rows: Sequence[Sequence[Any]]) -> Path:
    """Writes rows to a temporary sibling, then swaps it into place."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            csv.writer(f).writerows(rows)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path


class CsvStandingsSink:
    """Persists pool results as CSV files in one output directory."""

    def __init__(self, output_dir: Union[str, Path, None] = None):
        self.output_dir = Path(output_dir or settings.output_dir)

    def standings_path(self, kind: PoolKind) -> Path:
        return self.output_dir / STANDINGS_FILENAMES[kind]

    def unmatched_path(self, kind: PoolKind) -> Path:
        return self.output_dir / f"{kind.value}_unmatched.csv"

    def save_result(self, result: PoolResult) -> Path:
        """Writes the standings table, or the no-data placeholder, plus the unmatched report."""
        path = self.standings_path(result.kind)
        if result.has_data:
            _write_rows_atomic(path, result.table.as_rows())
            logger.success(
                f"{result.kind.value.capitalize()} standings saved to {path} "
                f"with {len(result.table.rows)} participants"
            )
        else:
            _write_rows_atomic(path, [[NO_DATA_MESSAGE]])
            logger.warning(f"No data rows for {result.kind.value}; wrote placeholder to {path}")

        self.save_unmatched(result.kind, result.unmatched)
        return path

    def save_unmatched(self, kind: PoolKind, unmatched: List[UnmatchedRecord]) -> Path:
        path = self.unmatched_path(kind)
        rows: List[List[Any]] = [["Participant", "Entry", "Normalized"]]
        rows.extend(
            [record.participant, record.original_name, record.normalized or ""]
            for record in unmatched
        )
        _write_rows_atomic(path, rows)
        if unmatched:
            logger.warning(f"{len(unmatched)} unmatched {kind.value} entries written to {path}")
        return path

    def save_standings_snapshot(self, rows: Sequence[Sequence[Any]]) -> Path:
        """Raw [conference, division, team, points] rows as returned by the API."""
        path = self.output_dir / SNAPSHOT_FILENAME
        _write_rows_atomic(path, rows)
        logger.info(f"Saved {len(rows)} standings records to {path}")
        return path
