"""
Rank players from a directory of tournament results.

Reads one sub-directory per tier of TSV finishing places and prints one line
per player with rank, rating and player id.

Usage examples:
  duorank --dir results --sorted
  duorank --dir results --from 2022 --to 2023-06 --no-small --format json
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from duorank import __version__
from duorank.algorithms.best_results import BestResultsEngine
from duorank.core.config import load_config
from duorank.core.errors import ConfigError, ResultReadError
from duorank.core.logging import setup_logging
from duorank.core.results import RankResult
from duorank.core.sentry import init_sentry
from duorank.core.time import Clock, parse_date_bound
from duorank.core.tournament import Tier
from duorank.ingest.results import ResultIngester

log = logging.getLogger("duorank.cli.rank")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="duorank",
        description=(
            "Read a directory of directories of TSV files reporting tournament "
            "finishing places, and print rank, rating and player ID."
        ),
    )
    parser.add_argument(
        "-d",
        "--dir",
        required=True,
        help="Directory containing one directory of TSV results per tier",
    )
    parser.add_argument(
        "-s",
        "--sorted",
        action="store_true",
        help="Order output by rank",
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="start",
        default=None,
        help="Ignore tournaments before this date (e.g. 2022 or 2022-03-01)",
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="end",
        default=None,
        help="Ignore tournaments after this date; its year is the current season",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML config file (default: packaged config.yaml)",
    )
    for tier in Tier:
        parser.add_argument(
            f"--no-{tier.value}",
            dest=f"no_{tier.value}",
            action="store_true",
            help=f"Exclude {tier.value} tournaments",
        )
    parser.add_argument(
        "--format",
        choices=["tsv", "csv", "json"],
        default="tsv",
        help="Output format (default: tsv without header)",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip unreadable result files instead of failing",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $DUORANK_LOG_LEVEL or WARNING)",
    )
    return parser


def _write_output(result: RankResult, fmt: str, sort: bool) -> None:
    frame = result.to_dataframe(sort=sort).select(["rank", "rating", "player_id"])
    if fmt == "json":
        sys.stdout.write(frame.write_json())
        sys.stdout.write("\n")
    elif fmt == "csv":
        sys.stdout.write(frame.write_csv())
    else:
        for rank, rating, player_id in frame.iter_rows():
            print(f"{rank}\t{rating}\t{player_id}")


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    setup_logging(
        level=args.log_level or os.getenv("DUORANK_LOG_LEVEL", "WARNING"),
        format_style=os.getenv("DUORANK_LOG_FORMAT", "simple"),
    )
    init_sentry(context="duorank", release=__version__)

    try:
        config = load_config(args.config)
    except (OSError, ConfigError) as exc:
        log.error("Could not load config: %s", exc)
        return 1

    try:
        start = parse_date_bound(args.start) if args.start else None
        end = parse_date_bound(args.end, upper=True) if args.end else None
    except ValueError as exc:
        log.error("%s", exc)
        return 1
    current_season = end.year if end is not None else Clock().current_season

    tiers = {tier for tier in Tier if not getattr(args, f"no_{tier.value}")}
    if not tiers:
        log.info("Every tier excluded; nothing to rank")
        return 0

    ingester = ResultIngester(
        args.dir,
        tiers=tiers,
        start=start,
        end=end,
        skip_invalid=args.skip_invalid,
        progress=log.isEnabledFor(logging.INFO),
    )
    try:
        tournaments = ingester.ingest()
    except ResultReadError as exc:
        log.error("%s", exc)
        return 1

    engine = BestResultsEngine(config, current_season=current_season)
    result = engine.rank_players(tournaments)
    _write_output(result, args.format, args.sorted)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
