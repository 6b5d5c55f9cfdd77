"""Validated tournament results and their conversion into player points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Iterator, Mapping

import numpy as np

from duorank.core.constants import BONUS_TABLE, UNRANKED_RANK
from duorank.core.errors import (
    InconsistentRanks,
    RatingInvariantError,
    RepeatedPlayer,
)
from duorank.core.team import PlayerId, Team
from duorank.core.time import ensure_utc

if TYPE_CHECKING:
    from duorank.core.config import RatingConfig


class Tier(str, Enum):
    """Tournament level; the value is also the results directory name."""

    SMALL = "small"
    MEDIUM = "medium"
    MAJOR = "major"
    CHAMPIONSHIP = "championship"

    @property
    def directory_name(self) -> str:
        return self.value


def bonus_points(rank: int) -> float:
    """Strength-of-field credit for finishing above a player of ``rank``."""
    for max_rank, points in BONUS_TABLE:
        if rank <= max_rank:
            return points
    return 0.0


@dataclass(frozen=True)
class Tournament:
    """One competition's finishing places, timestamp and tier.

    ``results`` must be sorted by place. Constructing ``Tournament`` directly
    skips validation; use :meth:`make` for untrusted results.
    """

    results: tuple[tuple[int, Team], ...]
    datetime: datetime
    tier: Tier

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))
        object.__setattr__(self, "datetime", ensure_utc(self.datetime))

    @classmethod
    def make(
        cls,
        results: Iterable[tuple[int, Team]],
        datetime: datetime,
        tier: Tier,
    ) -> Tournament:
        """Sort and validate results, then build the tournament.

        Places must follow standard competition ranking: tied teams share a
        place and the next place skips ahead by the size of the tie, so
        ``1, 2, 2, 4`` is valid and ``1, 2, 2, 3`` is not.

        Raises:
            RepeatedPlayer: If any player appears more than once.
            InconsistentRanks: If the places are not consistent.
        """
        ordered = sorted(results, key=lambda result: result[0])

        seen: set[PlayerId] = set()
        prev_place = 0
        increment = 1
        for place, team in ordered:
            for player in team.players():
                if player in seen:
                    raise RepeatedPlayer(player)
                seen.add(player)
            if place < 1:
                raise InconsistentRanks(place)
            if place == prev_place:
                increment += 1
            elif place != prev_place + increment:
                raise InconsistentRanks(place)
            else:
                prev_place = place
                increment = 1

        return cls(tuple(ordered), datetime, Tier(tier))

    @property
    def year(self) -> int:
        return self.datetime.year

    def players(self) -> Iterator[PlayerId]:
        for _, team in self.results:
            yield from team.players()

    def points(
        self,
        current_season: int,
        ranks: Mapping[PlayerId, int],
        config: RatingConfig,
    ) -> dict[PlayerId, float]:
        """Points earned by every player in this tournament.

        Places are walked from worst to best. A team scores its decayed place
        value plus the bonus accumulated from every strictly worse place
        group, and each teammate is credited half. Tied teams share the same
        bonus; their own contribution only reaches better places.

        Args:
            current_season: Year that tournament age is measured against.
            ranks: Rank table from the previous refresh; absent players
                count as unranked.
            config: Decay constants and tier point bases.

        Returns:
            Mapping of player id to points.
        """
        if not self.results:
            return {}

        age = float(current_season - self.year)
        places = np.fromiter(
            (place for place, _ in self.results),
            dtype=float,
            count=len(self.results),
        )
        raw = (
            config.point_base(self.tier)
            / np.power(config.finish_decay, places)
            / np.power(config.age_decay, age)
        )

        out: dict[PlayerId, float] = {}
        bonus = 0.0
        bonus_update = 0.0
        prev_place = self.results[-1][0] + 1
        for (place, team), team_raw in zip(reversed(self.results), raw[::-1]):
            if place != prev_place:
                bonus += bonus_update
                bonus_update = 0.0
                prev_place = place
            team_points = float(team_raw) + bonus
            if not math.isfinite(team_points):
                raise RatingInvariantError(
                    f"Non-finite points {team_points} at place {place}"
                )
            for player in team.players():
                out[player] = team_points / 2
                bonus_update += bonus_points(ranks.get(player, UNRANKED_RANK))
        return out
