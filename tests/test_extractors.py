"""Tests for roster column extraction and header detection."""

import pytest

from hockey_pool.models.roster import RosterRow
from hockey_pool.pipeline.extractors import (
    SkaterRosterExtractor,
    TeamRosterExtractor,
    looks_numeric,
)


class TestLooksNumeric:
    @pytest.mark.parametrize(
        "cell", ["87", "0", "12.5", "-3", "1e3", "", "0x1A", "0b101", "Infinity", "-Infinity"]
    )
    def test_numeric(self, cell):
        assert looks_numeric(cell) is True

    @pytest.mark.parametrize(
        "cell", ["Alice", "NaN", "nan", "inf", "1_000", "-0x1A", "87 pts", None]
    )
    def test_not_numeric(self, cell):
        assert looks_numeric(cell) is False


class TestSkaterRosterExtractor:
    def setup_method(self):
        self.extractor = SkaterRosterExtractor()

    def test_skips_header_row(self):
        rows = [["Player", "Skater"], ["Alice", "Crosby"]]
        assert self.extractor.extract(rows) == [RosterRow(participant="Alice", entity="Crosby")]

    def test_header_keyword_may_be_contained(self):
        assert self.extractor.is_header(["Pool Player", "Skater"])
        assert self.extractor.is_header(["PLAYER"])

    def test_without_header_first_row_is_data(self):
        rows = [["Alice", "Crosby"], ["Bob", "Ovechkin"]]
        assert [row.participant for row in self.extractor.extract(rows)] == ["Alice", "Bob"]

    def test_skips_short_and_empty_rows(self):
        rows = [["Alice"], ["Alice", ""], ["", "Crosby"], ["Bob", "Ovechkin", "extra"]]
        assert self.extractor.extract(rows) == [RosterRow(participant="Bob", entity="Ovechkin")]

    def test_header_only_in_first_row(self):
        rows = [["Alice", "Crosby"], ["Player", "Skater"]]
        extracted = self.extractor.extract(rows)
        assert len(extracted) == 2
        assert extracted[1] == RosterRow(participant="Player", entity="Skater")


class TestTeamRosterExtractor:
    def setup_method(self):
        self.extractor = TeamRosterExtractor()

    def test_points_column_present(self):
        assert self.extractor.extract([["TOR", "87", "Alice"]]) == [
            RosterRow(participant="Alice", entity="TOR")
        ]

    def test_points_column_absent(self):
        assert self.extractor.extract([["TOR", "Alice"]]) == [
            RosterRow(participant="Alice", entity="TOR")
        ]

    def test_empty_points_column(self):
        assert self.extractor.extract([["TOR", "", "Alice"]]) == [
            RosterRow(participant="Alice", entity="TOR")
        ]

    def test_non_numeric_second_column_wins_over_third(self):
        assert self.extractor.extract([["TOR", "Alice", "note"]]) == [
            RosterRow(participant="Alice", entity="TOR")
        ]

    @pytest.mark.parametrize("first_cell", ["Team", "team name", "TEAM"])
    def test_header_detection_is_exact(self, first_cell):
        assert self.extractor.is_header([first_cell, "Player"])

    def test_contained_keyword_is_not_a_header(self):
        rows = [["Team Canada", "Alice"]]
        assert not self.extractor.is_header(rows[0])
        assert self.extractor.extract(rows) == [RosterRow(participant="Alice", entity="Team Canada")]

    def test_skips_invalid_rows(self):
        rows = [["Team", "Points", "Player"], ["TOR"], ["", "Alice"], ["MTL", "90", ""], ["BOS", "Bob"]]
        assert self.extractor.extract(rows) == [RosterRow(participant="Bob", entity="BOS")]
