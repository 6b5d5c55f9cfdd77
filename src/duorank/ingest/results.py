"""
Loading tournament results from disk.

Results live in one directory per tier under a common root, with one tab
separated file per tournament whose name starts with the tournament date:

    results/
      small/2023-04-01_spring_cup.tsv
      major/2023/2023-06-17.tsv

Each file has a header row followed by ``place, player 1, player 2`` rows.
Lines starting with ``#`` are comments.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Iterable

import polars as pl
from tqdm import tqdm

from duorank.algorithms.best_results import sort_tournaments
from duorank.core.constants import RESULT_COMMENT_PREFIX, RESULT_FILE_PATTERN
from duorank.core.errors import InvalidTournament, ResultReadError
from duorank.core.team import Team
from duorank.core.time import MAX_UTC, MIN_UTC, ensure_utc
from duorank.core.tournament import Tier, Tournament

logger = logging.getLogger(__name__)

_FILE_RE = re.compile(RESULT_FILE_PATTERN)


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    text = raw.strip()
    # unsigned decimal only; int() would also take signs and underscores
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def parse_ranks(source: str | Path | IO[bytes] | bytes) -> list[tuple[int, Team]]:
    """Read ``(place, Team)`` rows from a results TSV.

    Rows with a missing or non-integer place or player id are skipped.

    Args:
        source: Path, binary file object or raw bytes of the TSV.

    Returns:
        Results in file order.

    Raises:
        RepeatedPlayer: If a row names the same player twice.
    """
    try:
        frame = pl.read_csv(
            source,
            separator="\t",
            comment_prefix=RESULT_COMMENT_PREFIX,
            has_header=True,
            infer_schema=False,
            truncate_ragged_lines=True,
        )
    except pl.exceptions.NoDataError:
        return []

    if frame.width < 3:
        logger.debug("Only %d columns present, no results read", frame.width)
        return []

    ranks: list[tuple[int, Team]] = []
    for place_raw, p1_raw, p2_raw in frame.select(frame.columns[:3]).iter_rows():
        place = _parse_int(place_raw)
        if place is None:
            logger.debug("Could not parse %r as rank, skipping", place_raw)
            continue
        player1 = _parse_int(p1_raw)
        if player1 is None:
            logger.debug("Could not parse %r as player ID, skipping", p1_raw)
            continue
        player2 = _parse_int(p2_raw)
        if player2 is None:
            logger.debug("Could not parse %r as player ID, skipping", p2_raw)
            continue
        ranks.append((place, Team.make(player1, player2)))
    return ranks


def _file_datetime(path: Path) -> datetime | None:
    match = _FILE_RE.search(path.name)
    if match is None:
        return None
    try:
        date = datetime.strptime(match.group("date"), "%Y-%m-%d")
    except ValueError:
        logger.warning("Invalid date in results file name %s, skipping", path)
        return None
    return date.replace(tzinfo=timezone.utc)


class ResultIngester:
    """Collect validated tournaments from a directory of tier directories.

    Args:
        root: Directory holding one sub-directory per tier.
        tiers: Tiers to read. Defaults to every tier.
        start: Earliest tournament date to include (inclusive).
        end: Latest tournament date to include (inclusive).
        skip_invalid: Log and skip unreadable files instead of raising.
        progress: Show a progress bar while reading files.
    """

    def __init__(
        self,
        root: str | Path,
        tiers: Iterable[Tier] | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        skip_invalid: bool = False,
        progress: bool = False,
    ) -> None:
        self.root = Path(root)
        self.tiers = set(tiers) if tiers is not None else set(Tier)
        self.start = ensure_utc(start) if start is not None else MIN_UTC
        self.end = ensure_utc(end) if end is not None else MAX_UTC
        self.skip_invalid = skip_invalid
        self.progress = progress

    def _result_files(self, directory: Path) -> list[tuple[Path, datetime]]:
        files = []
        for path in sorted(directory.rglob("*")):
            if not path.is_file():
                continue
            when = _file_datetime(path)
            if when is None:
                continue
            if when < self.start or when > self.end:
                continue
            files.append((path, when))
        return files

    def ingest_tier(self, tier: Tier) -> list[Tournament]:
        """Read every tournament of one tier within the date window."""
        directory = self.root / tier.directory_name
        if not directory.is_dir():
            logger.debug("No %s directory under %s", tier.value, self.root)
            return []

        files = self._result_files(directory)
        out: list[Tournament] = []
        for path, when in tqdm(
            files, desc=f"Loading {tier.value}", disable=not self.progress
        ):
            try:
                tournament = Tournament.make(parse_ranks(path), when, tier)
            except (InvalidTournament, OSError, pl.exceptions.PolarsError) as exc:
                error = ResultReadError(path, str(exc))
                if self.skip_invalid:
                    logger.warning("%s; skipping", error)
                    continue
                raise error from exc
            out.append(tournament)

        logger.info("Loaded %d %s tournaments", len(out), tier.value)
        return out

    def ingest(self) -> list[Tournament]:
        """Read all selected tiers, sorted chronologically."""
        tournaments: list[Tournament] = []
        for tier in Tier:
            if tier in self.tiers:
                tournaments.extend(self.ingest_tier(tier))
        return sort_tournaments(tournaments)
