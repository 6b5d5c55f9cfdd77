"""Exception types raised by the rating engine and its collaborators."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path


class InvalidTournament(ValueError):
    """A tournament's results could not be accepted."""


class RepeatedPlayer(InvalidTournament):
    """A player appears twice, either within one team or across teams."""

    def __init__(self, player_id: int) -> None:
        super().__init__(f"Repeated player: {player_id}")
        self.player_id = player_id


class InconsistentRanks(InvalidTournament):
    """Places do not follow standard competition ranking."""

    def __init__(self, place: int) -> None:
        super().__init__(f"Ranks are inconsistent at place {place}")
        self.place = place


class TournamentOrderError(RuntimeError):
    """Tournaments were fed to the engine out of chronological order."""

    def __init__(self, previous: datetime, current: datetime) -> None:
        super().__init__(
            f"Tournaments were not ordered: {current.isoformat()} "
            f"follows {previous.isoformat()}"
        )
        self.previous = previous
        self.current = current


class RatingInvariantError(ArithmeticError):
    """A points or rating value is NaN or infinite."""


class ConfigError(ValueError):
    """Invalid rating configuration."""


class ResultReadError(Exception):
    """A results file could not be read into a tournament."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Could not read {path}: {reason}")
        self.path = Path(path)
        self.reason = reason
