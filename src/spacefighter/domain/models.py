"""Dataclasses describing every spacefighter entity.

Players and fighters are separately addressable objects held by the
:class:`Ledger`, which acts as the owning store.  Links between them are
plain identifiers resolved through the ledger, never direct references, so
a fighter can be authorised and locked independently of its player.
"""

from __future__ import annotations

import itertools
import threading
import uuid
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NewType

from .errors import ObjectNotFound

if TYPE_CHECKING:
    from .events import DomainEvent

# --- Strongly typed identifiers -------------------------------------------------

Address = NewType("Address", str)
PlayerID = NewType("PlayerID", int)
FighterID = NewType("FighterID", int)
MissileID = NewType("MissileID", int)


# --- Core dataclasses -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Missile:
    """Consumable attachment; immutable once minted."""

    id: MissileID
    damage: int


@dataclass(slots=True)
class SpaceFighter:
    """Fighter unit owned by exactly one player."""

    id: FighterID
    player_id: PlayerID
    health: int
    damage: int
    pilot: str | None = None
    missiles: list[Missile] = field(default_factory=list)
    version: int = 0
    lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )


@dataclass(slots=True)
class Player:
    """Account bound to an address, holding gold and a fighter reference."""

    id: PlayerID
    address: Address
    fighter_id: FighterID
    level: int = 1
    gold: int = 0
    score: int = 0
    version: int = 0
    lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """Ranking row handed to the leaderboard collaborator."""

    player_id: PlayerID
    score: int


@dataclass(slots=True)
class Ledger:
    """Root aggregate and owning store for every object in a game."""

    players: dict[PlayerID, Player] = field(default_factory=dict)
    fighters: dict[FighterID, SpaceFighter] = field(default_factory=dict)
    missiles: dict[MissileID, Missile] = field(default_factory=dict)
    events: list[DomainEvent] = field(default_factory=list)
    owner_tokens: dict[PlayerID, uuid.UUID] = field(default_factory=dict)
    _player_ids: itertools.count = field(
        default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False
    )
    _fighter_ids: itertools.count = field(
        default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False
    )
    _missile_ids: itertools.count = field(
        default_factory=lambda: itertools.count(1), init=False, repr=False, compare=False
    )
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    @property
    def lock(self) -> threading.RLock:
        """Guards id allocation, registration and the free missile pool."""

        return self._lock

    def next_player_id(self) -> PlayerID:
        with self._lock:
            return PlayerID(next(self._player_ids))

    def next_fighter_id(self) -> FighterID:
        with self._lock:
            return FighterID(next(self._fighter_ids))

    def next_missile_id(self) -> MissileID:
        with self._lock:
            return MissileID(next(self._missile_ids))

    def get_player(self, player_id: PlayerID) -> Player:
        """Return the player or raise ``ObjectNotFound``."""

        player = self.players.get(player_id)
        if player is None:
            raise ObjectNotFound("player not found", {"player_id": int(player_id)})
        return player

    def get_fighter(self, fighter_id: FighterID) -> SpaceFighter:
        """Return the fighter or raise ``ObjectNotFound``."""

        fighter = self.fighters.get(fighter_id)
        if fighter is None:
            raise ObjectNotFound("fighter not found", {"fighter_id": int(fighter_id)})
        return fighter

    def get_missile(self, missile_id: MissileID) -> Missile:
        """Return a free-standing missile or raise ``ObjectNotFound``."""

        missile = self.missiles.get(missile_id)
        if missile is None:
            raise ObjectNotFound("missile not in free pool", {"missile_id": int(missile_id)})
        return missile

    def fighter_of(self, player: Player) -> SpaceFighter:
        return self.get_fighter(player.fighter_id)

    def record(self, event: DomainEvent) -> None:
        """Append a committed event to the ledger's log."""

        with self._lock:
            self.events.append(event)
