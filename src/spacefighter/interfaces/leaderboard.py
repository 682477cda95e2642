"""Leaderboard Protocol Interface."""

from typing import Protocol

from spacefighter.domain.models import LeaderboardEntry


class ILeaderboard(Protocol):
    """Protocol for an external ranking structure."""

    def update_leaderboard(self, entry: LeaderboardEntry) -> None:
        """Insert or refresh ``entry`` in the ranking."""
        ...
