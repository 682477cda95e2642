"""Immutable event records published after committed mutations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, ClassVar

from .enums import CombatResult, EventType
from .models import Address, FighterID, Ledger, MissileID, PlayerID

if TYPE_CHECKING:
    from spacefighter.interfaces import INotifier

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class PlayerCreated:
    kind: ClassVar[EventType] = EventType.PLAYER_CREATED

    player_id: PlayerID
    fighter_id: FighterID
    address: Address
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class MissileAttached:
    kind: ClassVar[EventType] = EventType.MISSILE_ATTACHED

    fighter_id: FighterID
    missile_id: MissileID
    missile_count: int
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class UpgradeApplied:
    kind: ClassVar[EventType] = EventType.UPGRADE_APPLIED

    fighter_id: FighterID
    new_health: int
    new_damage: int
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class GoldAwarded:
    kind: ClassVar[EventType] = EventType.GOLD_AWARDED

    player_id: PlayerID
    amount: int
    new_balance: int
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class CombatOutcome:
    kind: ClassVar[EventType] = EventType.COMBAT_OUTCOME

    player_id: PlayerID
    fighter_id: FighterID
    damage_dealt: int
    target_health: int
    result: CombatResult
    reward: int
    occurred_at: datetime = field(default_factory=_now)


@dataclass(frozen=True, slots=True)
class ScoreUpdated:
    kind: ClassVar[EventType] = EventType.SCORE_UPDATED

    player_id: PlayerID
    score: int
    occurred_at: datetime = field(default_factory=_now)


DomainEvent = (
    PlayerCreated | MissileAttached | UpgradeApplied | GoldAwarded | CombatOutcome | ScoreUpdated
)


def emit(ledger: Ledger, event: DomainEvent, notifier: INotifier | None = None) -> None:
    """Record a committed event and hand it to the notifier, if any.

    The mutation has already committed, so a failing notifier is logged and
    never reaches the caller.
    """

    ledger.record(event)
    if notifier is None:
        return
    try:
        if isinstance(event, CombatOutcome):
            notifier.emit_combat_outcome(event)
        elif isinstance(event, ScoreUpdated):
            notifier.emit_score_update(event)
        else:
            notifier.publish(event)
    except Exception:
        logger.exception("notifier failed for %s", event.kind)
