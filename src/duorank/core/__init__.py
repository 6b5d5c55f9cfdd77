"""Core components of the rating engine."""

from duorank.core.config import RatingConfig, load_config
from duorank.core.records import PlayerRecord
from duorank.core.results import RankResult
from duorank.core.team import PlayerId, Team
from duorank.core.time import Clock, parse_date_bound
from duorank.core.tournament import Tier, Tournament, bonus_points

__all__ = [
    # Config
    "RatingConfig",
    "load_config",
    # Model
    "PlayerId",
    "PlayerRecord",
    "Team",
    "Tier",
    "Tournament",
    "bonus_points",
    # Results
    "RankResult",
    # Time
    "Clock",
    "parse_date_bound",
]
