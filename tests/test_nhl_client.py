"""Tests for the NHL API client and its response parsers (no network)."""

import asyncio

import httpx
import pytest

from hockey_pool.scrapers.base_client import AuthenticationError, ScraperError
from hockey_pool.scrapers.nhl_client import (
    NhlStatsClient,
    parse_skater_goals,
    parse_standings_snapshot,
    parse_team_points,
)

LEADERS_PAYLOAD = {
    "goals": [
        {"firstName": {"default": "Leon"}, "lastName": {"default": "Draisaitl"}, "value": 52},
        {"firstName": {"default": "Sidney"}, "lastName": {"default": "Crosby"}, "value": 20},
        {"firstName": "Alex", "lastName": "Ovechkin", "value": None},
    ]
}

STANDINGS_PAYLOAD = {
    "standings": [
        {
            "conferenceName": "Eastern",
            "divisionName": "Atlantic",
            "teamName": {"default": "Toronto Maple Leafs", "fr": "Maple Leafs de Toronto"},
            "points": 87,
        },
        {
            "conferenceName": "Eastern",
            "divisionName": "Atlantic",
            "teamName": {"default": "Montréal Canadiens"},
            "points": 80,
        },
    ]
}


def make_client(handler):
    transport = httpx.MockTransport(handler)
    return NhlStatsClient(
        client=httpx.AsyncClient(transport=transport), base_url="https://nhl.test/v1/"
    )


async def _call(client, method_name, *args):
    async with client:
        return await getattr(client, method_name)(*args)


class TestParsers:
    def test_skater_names_joined_with_single_space(self):
        assert parse_skater_goals(LEADERS_PAYLOAD) == {
            "Leon Draisaitl": 52,
            "Sidney Crosby": 20,
            "Alex Ovechkin": 0,
        }

    def test_unexpected_structure(self):
        assert parse_skater_goals({"assists": []}) == {}
        assert parse_team_points({}) == {}
        assert parse_standings_snapshot({"standings": None}) == []

    def test_team_points_use_default_name(self):
        assert parse_team_points(STANDINGS_PAYLOAD) == {
            "Toronto Maple Leafs": 87,
            "Montréal Canadiens": 80,
        }

    def test_standings_snapshot_rows(self):
        assert parse_standings_snapshot(STANDINGS_PAYLOAD)[0] == [
            "Eastern",
            "Atlantic",
            "Toronto Maple Leafs",
            87,
        ]


class TestNhlStatsClient:
    def test_fetch_skater_goals(self):
        seen = {}

        def handler(request):
            seen["url"] = request.url
            return httpx.Response(200, json=LEADERS_PAYLOAD)

        goals = asyncio.run(_call(make_client(handler), "fetch_skater_goals", 50))
        assert goals["Leon Draisaitl"] == 52
        assert seen["url"].path == "/v1/skater-stats-leaders/current"
        assert seen["url"].params["categories"] == "goals"
        assert seen["url"].params["limit"] == "50"

    def test_fetch_team_points(self):
        def handler(request):
            assert request.url.path == "/v1/standings/now"
            return httpx.Response(200, json=STANDINGS_PAYLOAD)

        points = asyncio.run(_call(make_client(handler), "fetch_team_points"))
        assert points == {"Toronto Maple Leafs": 87, "Montréal Canadiens": 80}

    def test_not_found_is_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(404)

        with pytest.raises(ScraperError, match="404"):
            asyncio.run(_call(make_client(handler), "fetch_team_points"))
        assert len(calls) == 1

    def test_auth_failure(self):
        with pytest.raises(AuthenticationError):
            asyncio.run(
                _call(make_client(lambda request: httpx.Response(403)), "fetch_standings")
            )

    def test_invalid_json(self):
        with pytest.raises(ScraperError, match="Invalid JSON"):
            asyncio.run(
                _call(
                    make_client(lambda request: httpx.Response(200, text="<html>")),
                    "fetch_standings",
                )
            )
