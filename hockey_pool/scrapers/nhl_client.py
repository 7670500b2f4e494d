# hockey_pool/scrapers/nhl_client.py

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from hockey_pool.config.settings import settings
from .base_client import BaseClient, ScraperError


def _localized(value: Any) -> str:
    """NHL API strings come as {"default": "..."} or as plain strings."""
    if isinstance(value, dict):
        value = value.get("default", "")
    return str(value or "")


def parse_skater_goals(data: Dict[str, Any]) -> Dict[str, int]:
    """Builds skater full name -> goals from a skater-stats-leaders payload.

    Full name is firstName + " " + lastName, joined verbatim.
    """
    leaders = data.get("goals") if isinstance(data, dict) else None
    if not isinstance(leaders, list):
        logger.warning("Unexpected skater leaders response structure")
        return {}

    goals_by_name: Dict[str, int] = {}
    for leader in leaders:
        if not isinstance(leader, dict):
            continue
        full_name = f"{_localized(leader.get('firstName'))} {_localized(leader.get('lastName'))}"
        goals_by_name[full_name] = leader.get("value") or 0
        logger.debug(f"Skater: {full_name} - Goals: {goals_by_name[full_name]}")

    logger.info(f"Fetched goals for {len(goals_by_name)} skaters")
    return goals_by_name


def parse_team_points(data: Dict[str, Any]) -> Dict[str, int]:
    """Builds team name -> standings points from a standings payload."""
    records = data.get("standings") if isinstance(data, dict) else None
    if not isinstance(records, list):
        logger.warning("Unexpected standings response structure")
        return {}

    points_by_team: Dict[str, int] = {}
    for record in records:
        if not isinstance(record, dict):
            continue
        team_name = _localized(record.get("teamName"))
        if not team_name:
            continue
        points_by_team[team_name] = record.get("points") or 0

    logger.info(f"Fetched points for {len(points_by_team)} teams")
    return points_by_team


def parse_standings_snapshot(data: Dict[str, Any]) -> List[List[Any]]:
    """[conference, division, team, points] rows for the raw standings dump."""
    records = data.get("standings") if isinstance(data, dict) else None
    if not isinstance(records, list):
        return []
    return [
        [
            record.get("conferenceName", ""),
            record.get("divisionName", ""),
            _localized(record.get("teamName")),
            record.get("points") or 0,
        ]
        for record in records
        if isinstance(record, dict)
    ]


class NhlStatsClient(BaseClient):
    """Fetches live scoring data from the public NHL web API."""

    source_name = "NHL API"

    def __init__(
        self, client: Optional[httpx.AsyncClient] = None, base_url: Optional[str] = None
    ):
        super().__init__(client)
        self.base_url = (base_url or settings.nhl_api_base_url).rstrip("/")

    async def fetch_skater_goals(self, limit: Optional[int] = None) -> Dict[str, int]:
        """Map of "FirstName LastName" -> goals for the current goal leaders."""
        limit = limit or settings.skater_leaders_limit
        logger.info(f"Fetching top {limit} goal scorers from {self.source_name}...")
        data = await self._get_json(
            f"{self.base_url}/skater-stats-leaders/current",
            params={"categories": "goals", "limit": limit},
        )
        return parse_skater_goals(data)

    async def fetch_standings(self) -> Dict[str, Any]:
        logger.info(f"Fetching current standings from {self.source_name}...")
        data = await self._get_json(f"{self.base_url}/standings/now")
        if not isinstance(data, dict):
            raise ScraperError("Standings response is not a JSON object")
        return data

    async def fetch_team_points(self) -> Dict[str, int]:
        """Map of official team name -> standings points."""
        return parse_team_points(await self.fetch_standings())
