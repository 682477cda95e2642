"""Declarative rule configuration for the domain layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PlayerRules:
    """Starting values for a freshly created account."""

    initial_level: int = 1
    initial_gold: int = 0


@dataclass(frozen=True, slots=True)
class FighterRules:
    """Fighter base stats and inventory bound."""

    initial_health: int = 100
    initial_damage: int = 20
    max_missiles: int = 4


@dataclass(frozen=True, slots=True)
class MissileRules:
    """Missile minting constants."""

    damage: int = 50


@dataclass(frozen=True, slots=True)
class UpgradeRules:
    """Cost and effect of a fighter upgrade."""

    cost: int = 30
    health_gain: int = 30
    damage_gain: int = 15


@dataclass(frozen=True, slots=True)
class CombatRules:
    """Parameters for the bundled combat and reward collaborators."""

    level_damage_bonus: int = 5  # per level above 1
    win_reward: int = 10
    loss_reward: int = 0


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    player: PlayerRules = PlayerRules()
    fighter: FighterRules = FighterRules()
    missile: MissileRules = MissileRules()
    upgrade: UpgradeRules = UpgradeRules()
    combat: CombatRules = CombatRules()


DEFAULT_RULES = RulesConfig()
