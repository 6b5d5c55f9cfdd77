"""Result dataclass for a rating run."""

from __future__ import annotations

from dataclasses import dataclass

import polars as pl

from duorank.core.records import PlayerRecord
from duorank.core.team import PlayerId


@dataclass
class RankResult:
    """Final ranks and records of a rating run."""

    ranks: dict[PlayerId, int]
    records: dict[PlayerId, PlayerRecord]
    current_season: int
    n_tournaments: int = 0

    def to_dataframe(self, sort: bool = True) -> pl.DataFrame:
        """Convert results to a Polars DataFrame.

        Args:
            sort: Order rows by rank, then player id. Defaults to True.

        Returns:
            DataFrame with columns rank, rating, player_id and n_results.
        """
        player_ids = list(self.ranks)
        dataframe = pl.DataFrame(
            {
                "rank": [self.ranks[pid] for pid in player_ids],
                "rating": [self.records[pid].rating for pid in player_ids],
                "player_id": player_ids,
                "n_results": [self.records[pid].n_results for pid in player_ids],
            },
            schema={
                "rank": pl.Int64,
                "rating": pl.Float64,
                "player_id": pl.Int64,
                "n_results": pl.Int64,
            },
        )
        if sort:
            dataframe = dataframe.sort(["rank", "player_id"])
        return dataframe

    def get_top_n(self, count: int = 10) -> pl.DataFrame:
        """Get the ``count`` best ranked players."""
        return self.to_dataframe().head(count)
