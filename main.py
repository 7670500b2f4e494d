import sys
import argparse
import asyncio
from typing import Dict, List, Optional

# --- Settings/Logging ---
from hockey_pool.logging.setup import setup_logging
from hockey_pool.config.settings import settings

setup_logging()

from loguru import logger

# Data Models and Core Logic Imports
from hockey_pool.models.enums import PoolKind
from hockey_pool.models.roster import Score
from hockey_pool.models.standings import PoolResult
from hockey_pool.normalization.aliases import (
    SKATER_ALIASES,
    TEAM_ALIASES,
    validate_alias_table,
)
from hockey_pool.parsing.csv_parser import parse_csv_content
from hockey_pool.pipeline.matcher import fill_missing_scores
from hockey_pool.pipeline.pool import (
    InputMalformedError,
    PoolConfig,
    PoolPipeline,
    skater_pool_config,
    team_pool_config,
)
from hockey_pool.scrapers.base_client import ScraperError
from hockey_pool.scrapers.nhl_client import NhlStatsClient, parse_standings_snapshot, parse_team_points
from hockey_pool.sources.roster_source import RosterSource, RosterSourceError
from hockey_pool.storage.console import render_result
from hockey_pool.storage.csv_sink import CsvStandingsSink


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Update NHL pool standings.")
    parser.add_argument(
        "--pool",
        choices=["skaters", "teams", "all"],
        default="all",
        help="Which pool to update (default: all).",
    )
    parser.add_argument(
        "--roster",
        help="Roster CSV (local path, repository path or URL). Only valid with a single pool.",
    )
    parser.add_argument("--output-dir", help="Directory for the standings CSV files.")
    args = parser.parse_args(argv)
    if args.roster and args.pool == "all":
        parser.error("--roster needs --pool skaters or --pool teams")
    return args


def validate_aliases() -> None:
    """Startup check of both alias tables; ambiguities are logged, not fatal."""
    for name, table in (("skater", SKATER_ALIASES), ("team", TEAM_ALIASES)):
        collisions = validate_alias_table(table)
        if collisions:
            logger.warning(f"{len(collisions)} ambiguous {name} aliases found")
        else:
            logger.debug(f"{name.capitalize()} alias table OK ({len(table)} aliases)")


async def fetch_scores(
    config: PoolConfig,
    nhl_client: NhlStatsClient,
    sink: CsvStandingsSink,
    rows: List[List[str]],
) -> Dict[str, Score]:
    if config.kind == PoolKind.SKATERS:
        scores = await nhl_client.fetch_skater_goals()
        if settings.zero_fill_missing_skaters:
            entities = PoolPipeline(config).roster_entities(rows)
            scores = fill_missing_scores(entities, scores, config.normalizer)
        return scores

    standings = await nhl_client.fetch_standings()
    sink.save_standings_snapshot(parse_standings_snapshot(standings))
    return parse_team_points(standings)


async def run_pool(
    config: PoolConfig,
    roster_location: str,
    roster_source: RosterSource,
    nhl_client: NhlStatsClient,
    sink: CsvStandingsSink,
) -> PoolResult:
    """Runs one pool end to end: roster -> scores -> standings -> sink."""
    logger.info(f"=== Starting {config.kind.value} pool update ===")

    csv_content = await roster_source.read(roster_location)
    rows = parse_csv_content(csv_content)
    if not rows:
        raise InputMalformedError(f"Roster '{roster_location}' is empty or could not be parsed")
    logger.info(f"Loaded {len(rows)} rows from {roster_location}")

    scores = await fetch_scores(config, nhl_client, sink, rows)
    logger.info(f"Retrieved {config.score_label} for {len(scores)} names")

    result = PoolPipeline(config).run(rows, scores)
    sink.save_result(result)
    render_result(result, config.top_k)

    logger.info(f"=== {config.kind.value.capitalize()} pool update complete ===")
    return result


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    validate_aliases()

    jobs = []
    if args.pool in ("skaters", "all"):
        jobs.append((skater_pool_config(), args.roster or settings.skaters_roster_path))
    if args.pool in ("teams", "all"):
        jobs.append((team_pool_config(), args.roster or settings.teams_roster_path))

    sink = CsvStandingsSink(args.output_dir)
    failures = 0
    async with RosterSource() as roster_source, NhlStatsClient() as nhl_client:
        for config, roster_location in jobs:
            try:
                await run_pool(config, roster_location, roster_source, nhl_client, sink)
            except (InputMalformedError, RosterSourceError) as e:
                logger.error(f"{config.kind.value.capitalize()} pool aborted: {e}")
                failures += 1
            except ScraperError as e:
                logger.error(f"{config.kind.value.capitalize()} pool aborted, NHL API error: {e}")
                failures += 1
            except Exception:
                logger.exception(f"Unexpected error updating the {config.kind.value} pool")
                failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
