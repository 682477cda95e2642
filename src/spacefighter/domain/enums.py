"""Enumerations used across the domain layer."""

from __future__ import annotations

from enum import StrEnum


class EventType(StrEnum):
    """Kinds of domain events published after a committed mutation."""

    PLAYER_CREATED = "player_created"
    MISSILE_ATTACHED = "missile_attached"
    UPGRADE_APPLIED = "upgrade_applied"
    GOLD_AWARDED = "gold_awarded"
    COMBAT_OUTCOME = "combat_outcome"
    SCORE_UPDATED = "score_updated"


class CombatResult(StrEnum):
    """Result of a settled engagement."""

    WIN = "win"
    LOSS = "loss"
