"""Best-results skill ratings for two-player team tournaments."""

from __future__ import annotations

from duorank.algorithms import (
    BestResultsEngine,
    rank_players,
    records_to_ranks,
    sort_tournaments,
)
from duorank.core import (
    PlayerRecord,
    RankResult,
    RatingConfig,
    Team,
    Tier,
    Tournament,
    load_config,
)
from duorank.core.errors import (
    InconsistentRanks,
    InvalidTournament,
    RepeatedPlayer,
    TournamentOrderError,
)
from duorank.ingest import ResultIngester, parse_ranks

__version__ = "0.1.0"

__all__ = [
    # Engine
    "BestResultsEngine",
    "rank_players",
    "records_to_ranks",
    "sort_tournaments",
    # Model
    "PlayerRecord",
    "RankResult",
    "RatingConfig",
    "Team",
    "Tier",
    "Tournament",
    "load_config",
    # Errors
    "InconsistentRanks",
    "InvalidTournament",
    "RepeatedPlayer",
    "TournamentOrderError",
    # Ingest
    "ResultIngester",
    "parse_ranks",
    "__version__",
]
