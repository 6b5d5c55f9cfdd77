"""Rating algorithm implementations."""

from duorank.algorithms.best_results import (
    BestResultsEngine,
    rank_players,
    records_to_ranks,
    sort_tournaments,
)

__all__ = [
    "BestResultsEngine",
    "rank_players",
    "records_to_ranks",
    "sort_tournaments",
]
