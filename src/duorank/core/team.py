"""Two-player teams with a canonical player order."""

from __future__ import annotations

from dataclasses import dataclass

from duorank.core.errors import RepeatedPlayer

PlayerId = int


@dataclass(frozen=True)
class Team:
    """An unordered pair of distinct players stored as ``early < late``.

    Constructing ``Team`` directly trusts the caller; use :meth:`make` for
    untrusted input.
    """

    early: PlayerId
    late: PlayerId

    @classmethod
    def make(cls, player1: PlayerId, player2: PlayerId) -> Team:
        """Build a team from two players in any order.

        Raises:
            RepeatedPlayer: If both players are the same.
        """
        if player1 == player2:
            raise RepeatedPlayer(player1)
        if player1 < player2:
            return cls(player1, player2)
        return cls(player2, player1)

    def players(self) -> tuple[PlayerId, PlayerId]:
        return (self.early, self.late)
