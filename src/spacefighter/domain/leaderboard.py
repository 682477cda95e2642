"""In-memory leaderboard used when no external ranking service is wired."""

from __future__ import annotations

import threading

from .models import LeaderboardEntry, PlayerID


class Leaderboard:
    """Keep the best ``size`` players ordered by score, ties by player id."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._scores: dict[PlayerID, int] = {}
        self._lock = threading.Lock()

    def update_leaderboard(self, entry: LeaderboardEntry) -> None:
        with self._lock:
            self._scores[entry.player_id] = entry.score
            if len(self._scores) > self.size:
                for stale in self._ranked()[self.size :]:
                    del self._scores[stale.player_id]

    def _ranked(self) -> list[LeaderboardEntry]:
        rows = [LeaderboardEntry(player_id=pid, score=score) for pid, score in self._scores.items()]
        return sorted(rows, key=lambda row: (-row.score, int(row.player_id)))

    def top(self) -> list[LeaderboardEntry]:
        with self._lock:
            return self._ranked()

    def rank_of(self, player_id: PlayerID) -> int | None:
        """1-based rank, or ``None`` when the player is not on the board."""

        for position, row in enumerate(self.top(), start=1):
            if row.player_id == player_id:
                return position
        return None
