"""Tests for skater and team name normalization."""

import pytest

from hockey_pool.normalization.aliases import NHL_OFFICIAL_TEAMS, SKATER_ALIASES, TEAM_ALIASES
from hockey_pool.normalization.normalizer import (
    NameNormalizer,
    TeamNameNormalizer,
    skater_normalizer,
)


class TestSkaterNormalizer:
    def setup_method(self):
        self.normalizer = skater_normalizer()

    def test_every_alias_resolves_to_its_canonical_name(self):
        for alias, canonical in SKATER_ALIASES.items():
            assert self.normalizer.normalize(alias) == canonical
            assert self.normalizer.normalize(canonical) == canonical

    @pytest.mark.parametrize("raw", ["", "   ", "\t", None])
    def test_blank_input_fails(self, raw):
        assert self.normalizer.normalize(raw) is None

    def test_case_insensitive_lookup(self):
        assert self.normalizer.normalize("CROSBY") == self.normalizer.normalize("Crosby")
        assert self.normalizer.normalize("mcdavid") == "Connor McDavid"
        assert self.normalizer.normalize("j hughes") == "Jack Hughes"

    def test_surrounding_whitespace(self):
        assert self.normalizer.normalize("  Draisaitl  ") == "Leon Draisaitl"
        assert self.normalizer.normalize("Marchand ") == "Brad Marchand"

    def test_unknown_name_passes_through_trimmed(self):
        assert self.normalizer.normalize("  Invalid Player ") == "Invalid Player"

    def test_resolve_does_not_pass_through(self):
        assert self.normalizer.resolve("Invalid Player") is None
        assert self.normalizer.resolve("crosby") == "Sidney Crosby"
        assert self.normalizer.resolve("Sidney Crosby") == "Sidney Crosby"
        assert self.normalizer.resolve(None) is None

    def test_mapped_entities_sorted_and_unique(self):
        entities = self.normalizer.mapped_entities()
        assert entities == sorted(set(SKATER_ALIASES.values()))
        assert "Sidney Crosby" in entities

    def test_normalize_many_keeps_order(self):
        pairs = self.normalizer.normalize_many(["McDavid", "", "Nobody"])
        assert pairs == [("McDavid", "Connor McDavid"), ("", None), ("Nobody", "Nobody")]


class TestTeamNormalizer:
    def setup_method(self):
        self.normalizer = TeamNameNormalizer()

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("TOR", "Toronto Maple Leafs"),
            ("Toronto Maple Leafs", "Toronto Maple Leafs"),
            ("Leafs", "Toronto Maple Leafs"),
            ("MTL", "Montréal Canadiens"),
            ("Montreal Canadiens", "Montréal Canadiens"),
            ("Montréal Canadiens", "Montréal Canadiens"),
            ("Habs", "Montréal Canadiens"),
            ("VGK", "Vegas Golden Knights"),
            ("Knights", "Vegas Golden Knights"),
            ("St Louis Blues", "St. Louis Blues"),
            ("T.B", "Tampa Bay Lightning"),
            ("Utah", "Utah Mammoth"),
        ],
    )
    def test_known_spellings(self, raw, expected):
        assert self.normalizer.normalize(raw) == expected

    def test_unknown_team_returns_none(self):
        assert self.normalizer.normalize("Invalid Team Name") is None
        assert self.normalizer.normalize("Quebec Nordiques") is None

    def test_case_insensitive_lookup(self):
        assert self.normalizer.normalize("tor") == "Toronto Maple Leafs"
        assert self.normalizer.normalize("HABS") == self.normalizer.normalize("Habs")

    def test_identity_closure(self):
        for alias, canonical in TEAM_ALIASES.items():
            assert self.normalizer.normalize(alias) == canonical
            assert self.normalizer.normalize(canonical) == canonical
        for official in NHL_OFFICIAL_TEAMS.values():
            assert self.normalizer.normalize(official) == official

    def test_abbreviations(self):
        abbreviations = self.normalizer.abbreviations()
        assert len(abbreviations) == 32
        assert abbreviations == sorted(abbreviations)
        assert "UTA" in abbreviations


class TestCaseFoldingOrder:
    def test_first_alias_in_table_order_wins(self):
        # Ambiguous on purpose: only the first differently-cased alias counts
        normalizer = NameNormalizer(
            {"Max": "Max Domi", "MAX": "Max Pacioretty"}, pass_through=False
        )
        assert normalizer.normalize("Max") == "Max Domi"
        assert normalizer.normalize("MAX") == "Max Pacioretty"
        assert normalizer.normalize("max") == "Max Domi"

    def test_canonical_name_without_identity_alias(self):
        normalizer = NameNormalizer({"Pasta": "David Pastrnak"}, pass_through=False)
        assert normalizer.normalize("David Pastrnak") == "David Pastrnak"
