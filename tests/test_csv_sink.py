"""Tests for the CSV output sink."""

import csv

from hockey_pool.models.enums import PoolKind
from hockey_pool.models.roster import UnmatchedRecord
from hockey_pool.models.standings import PoolResult
from hockey_pool.pipeline.output import shape_standings
from hockey_pool.storage.csv_sink import NO_DATA_MESSAGE, CsvStandingsSink


def read_csv(path):
    with open(path, encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


class TestCsvStandingsSink:
    def test_writes_standings_and_unmatched(self, tmp_path):
        sink = CsvStandingsSink(tmp_path)
        result = PoolResult(
            kind=PoolKind.SKATERS,
            table=shape_standings([["Alice", 35, "Sidney Crosby: 20", "Alex Ovechkin: 15"]], top_k=4),
            unmatched=[UnmatchedRecord(participant="Bob", original_name="InvalidName", normalized="InvalidName")],
        )

        path = sink.save_result(result)

        assert path.name == "player_pool_standings.csv"
        assert read_csv(path) == [
            ["Participant", "Top 4 Total", "Entity 1", "Entity 2"],
            ["Alice", "35", "Sidney Crosby: 20", "Alex Ovechkin: 15"],
        ]
        assert read_csv(sink.unmatched_path(PoolKind.SKATERS)) == [
            ["Participant", "Entry", "Normalized"],
            ["Bob", "InvalidName", "InvalidName"],
        ]
        assert not list(tmp_path.glob(".*"))  # no temp files left behind

    def test_placeholder_when_no_rows(self, tmp_path):
        sink = CsvStandingsSink(tmp_path / "nested")
        result = PoolResult(kind=PoolKind.TEAMS, table=shape_standings([], top_k=3))

        path = sink.save_result(result)

        assert path.name == "team_pool_standings.csv"
        assert read_csv(path) == [[NO_DATA_MESSAGE]]

    def test_snapshot(self, tmp_path):
        path = CsvStandingsSink(tmp_path).save_standings_snapshot(
            [["Eastern", "Atlantic", "Toronto Maple Leafs", 87]]
        )
        assert read_csv(path) == [["Eastern", "Atlantic", "Toronto Maple Leafs", "87"]]
