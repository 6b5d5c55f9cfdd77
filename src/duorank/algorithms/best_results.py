"""
Best-results rating engine.

Tournaments are scored in chronological order against the rank table of
the players' earlier results, and each player's rating is the sum of their
best ``record_length`` contributions.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import polars as pl

from duorank.core.config import RatingConfig
from duorank.core.errors import TournamentOrderError
from duorank.core.logging import get_logger, log_timing
from duorank.core.records import PlayerRecord
from duorank.core.results import RankResult
from duorank.core.team import PlayerId
from duorank.core.time import MIN_UTC, Clock
from duorank.core.tournament import Tournament

logger = get_logger(__name__)


def records_to_ranks(
    records: Mapping[PlayerId, PlayerRecord],
) -> dict[PlayerId, int]:
    """Derive competition ranks from player ratings.

    The highest rating is rank 1. Equal ratings share a rank and the next
    distinct rating skips ahead by the size of the tie.
    """
    if not records:
        return {}
    ratings = pl.DataFrame(
        {
            "player_id": list(records),
            "rating": [record.rating for record in records.values()],
        },
        schema={"player_id": pl.Int64, "rating": pl.Float64},
    ).with_columns(
        pl.col("rating")
        .rank(method="min", descending=True)
        .cast(pl.Int64)
        .alias("rank")
    )
    return dict(
        zip(ratings["player_id"].to_list(), ratings["rank"].to_list())
    )


def sort_tournaments(tournaments: Iterable[Tournament]) -> list[Tournament]:
    """Chronological order; tournaments at the same instant keep input order."""
    return sorted(tournaments, key=lambda tournament: tournament.datetime)


def rank_players(
    tournaments: Sequence[Tournament],
    current_season: int,
    config: RatingConfig | None = None,
) -> tuple[dict[PlayerId, int], dict[PlayerId, PlayerRecord]]:
    """Score tournaments in time order and rank players by their best results.

    Each tournament is scored against the rank table as of the last closed
    timestamp. The table is refreshed when a strictly later timestamp is
    reached, so every tournament sharing an instant sees the same snapshot,
    and once more at the end.

    Args:
        tournaments: Tournaments sorted non-decreasing by datetime.
        current_season: Year that tournament ages are measured against.
        config: Rating parameters. Defaults to ``RatingConfig()``.

    Returns:
        Tuple of (rank table, player records).

    Raises:
        TournamentOrderError: If a tournament is earlier than its
            predecessor. Nothing is returned in that case.
    """
    config = config or RatingConfig()
    prev_dt = MIN_UTC
    ranks: dict[PlayerId, int] = {}
    records: dict[PlayerId, PlayerRecord] = {}
    needs_updating = False

    for tournament in tournaments:
        if tournament.datetime < prev_dt:
            raise TournamentOrderError(prev_dt, tournament.datetime)
        if tournament.datetime > prev_dt:
            if needs_updating:
                ranks = records_to_ranks(records)
                logger.debug(
                    "Refreshed ranks for %d players before %s",
                    len(ranks),
                    tournament.datetime.isoformat(),
                )
            prev_dt = tournament.datetime
            needs_updating = False
        else:
            logger.debug(
                "Tournament at %s joins a simultaneous batch",
                tournament.datetime.isoformat(),
            )

        points = tournament.points(current_season, ranks, config)
        for player_id, player_points in points.items():
            record = records.get(player_id)
            if record is None:
                record = PlayerRecord(player_id, config.record_length)
                records[player_id] = record
            record.add_result(player_points)
        needs_updating = True

    if needs_updating:
        ranks = records_to_ranks(records)
    return ranks, records


class BestResultsEngine:
    """Rating engine summing each player's best tournament results.

    Wraps :func:`rank_players` with a fixed configuration and season and
    keeps the outcome of the last run.
    """

    def __init__(
        self,
        config: RatingConfig | None = None,
        *,
        current_season: int | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config or RatingConfig()
        self.clock = clock or Clock()
        self.current_season = (
            current_season
            if current_season is not None
            else self.clock.current_season
        )
        self.logger = get_logger(self.__class__.__name__)
        self.last_result: RankResult | None = None

    def rank_players(
        self,
        tournaments: Iterable[Tournament],
        *,
        presorted: bool = True,
    ) -> RankResult:
        """Rank players from tournaments.

        Args:
            tournaments: Validated tournaments.
            presorted: Set to False to sort chronologically first.

        Returns:
            RankResult with ranks and records.
        """
        ordered = (
            list(tournaments) if presorted else sort_tournaments(tournaments)
        )
        with log_timing(
            self.logger,
            f"ranking {len(ordered)} tournaments for season {self.current_season}",
        ):
            ranks, records = rank_players(
                ordered, self.current_season, self.config
            )
        self.last_result = RankResult(
            ranks=ranks,
            records=records,
            current_season=self.current_season,
            n_tournaments=len(ordered),
        )
        return self.last_result
