from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from loguru import logger

from hockey_pool.normalization.aliases import (
    NHL_OFFICIAL_TEAMS,
    SKATER_ALIASES,
    TEAM_ALIASES,
)


class NameNormalizer:
    """Maps free-form roster spellings to canonical entity names.

    Lookup order: exact alias, verbatim canonical name, case-insensitive alias
    (first alias in table order wins). What happens on a miss is decided by
    ``pass_through``: return the trimmed input so it can still be joined
    against the scores downstream, or return None.
    """

    def __init__(self, aliases: Mapping[str, str], pass_through: bool, label: str = "entity"):
        self.aliases = aliases
        self.pass_through = pass_through
        self.label = label
        self._canonical_names = frozenset(aliases.values())
        # Key: lowercased alias, Value: canonical name of the first alias seen
        self._folded_aliases: Dict[str, str] = {}
        for alias, canonical in aliases.items():
            self._folded_aliases.setdefault(alias.lower(), canonical)

        logger.debug(
            f"{self.label.capitalize()} normalizer initialized with {len(self.aliases)} aliases "
            f"for {len(self._canonical_names)} names."
        )

    def resolve(self, raw_name: Optional[str]) -> Optional[str]:
        """Canonical name from the alias table only: no pass-through, no logging."""
        if raw_name is None:
            return None
        trimmed = str(raw_name).strip()
        if not trimmed:
            return None

        # Aliases may carry trailing spaces, so try the untrimmed spelling first
        for candidate in (raw_name, trimmed):
            canonical = self.aliases.get(candidate)
            if canonical is not None:
                return canonical

        if trimmed in self._canonical_names:
            return trimmed

        return self._folded_aliases.get(trimmed.lower())

    def normalize(self, raw_name: Optional[str]) -> Optional[str]:
        """Returns the canonical name for ``raw_name``, or None when it cannot be resolved."""
        canonical = self.resolve(raw_name)
        if canonical is not None:
            return canonical
        trimmed = str(raw_name).strip() if raw_name is not None else ""
        if not trimmed:
            return None

        if self.pass_through:
            logger.warning(
                f"{self.label.capitalize()} name '{raw_name}' not found in aliases, using as-is"
            )
            return trimmed

        logger.warning(f"Could not normalize {self.label} name: '{raw_name}'")
        return None

    def normalize_many(self, raw_names: Iterable[str]) -> List[Tuple[str, Optional[str]]]:
        """(original, normalized) pairs, in input order."""
        return [(raw_name, self.normalize(raw_name)) for raw_name in raw_names]

    def mapped_entities(self) -> List[str]:
        """Sorted canonical names this normalizer can resolve to."""
        return sorted(self._canonical_names)


class TeamNameNormalizer(NameNormalizer):
    """Team variant: requires a confirmed match, never passes unknown names through."""

    def __init__(
        self,
        aliases: Mapping[str, str] = TEAM_ALIASES,
        official_teams: Mapping[str, str] = NHL_OFFICIAL_TEAMS,
    ):
        self.official_teams = official_teams
        super().__init__(aliases, pass_through=False, label="team")

    def abbreviations(self) -> List[str]:
        return sorted(self.official_teams)


def skater_normalizer() -> NameNormalizer:
    """Skater variant: unknown names pass through trimmed and fail later at the score join."""
    return NameNormalizer(SKATER_ALIASES, pass_through=True, label="skater")
