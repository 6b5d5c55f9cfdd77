"""Per-player accumulator of the best point contributions."""

from __future__ import annotations

import heapq
import math
from typing import Iterable

from duorank.core.errors import RatingInvariantError
from duorank.core.team import PlayerId


class PlayerRecord:
    """A player's best ``record_length`` contributions and their sum.

    Contributions are kept in a min-heap so the weakest retained result is
    the one evicted when a new result arrives on a full record. Decay is
    already part of each contribution, so eviction is purely by value.
    """

    def __init__(self, player_id: PlayerId, record_length: int) -> None:
        self.id = player_id
        self.record_length = record_length
        self.rating = 0.0
        self._points: list[float] = []

    @classmethod
    def with_points(
        cls,
        player_id: PlayerId,
        record_length: int,
        points: Iterable[float],
    ) -> PlayerRecord:
        record = cls(player_id, record_length)
        for value in points:
            record.add_result(value)
        return record

    def add_result(self, points: float) -> tuple[bool, float]:
        """Fold one contribution into the record.

        Returns:
            ``(changed, rating)`` where ``changed`` is False when the rating
            is unaffected.

        Raises:
            RatingInvariantError: If ``points`` is NaN or infinite.
        """
        points = float(points)
        if not math.isfinite(points):
            raise RatingInvariantError(
                f"Player {self.id} was credited non-finite points: {points}"
            )

        if len(self._points) < self.record_length:
            heapq.heappush(self._points, points)
            changed = points != 0
        else:
            changed = heapq.heappushpop(self._points, points) != points

        if changed:
            # exact sum, so the rating only depends on the retained values
            self.rating = math.fsum(self._points)
        return changed, self.rating

    @property
    def results(self) -> list[float]:
        """Retained contributions, best first."""
        return sorted(self._points, reverse=True)

    @property
    def n_results(self) -> int:
        return len(self._points)

    def __repr__(self) -> str:
        return (
            f"PlayerRecord(id={self.id!r}, rating={self.rating:.4f}, "
            f"n_results={self.n_results})"
        )
