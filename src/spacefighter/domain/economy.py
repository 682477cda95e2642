"""Gold deductions, upgrades and reward credits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .capabilities import AdministrativeCapability, authorize_admin
from .errors import InsufficientGold, OwnershipMismatch
from .events import GoldAwarded, UpgradeApplied, emit
from .guard import transaction
from .models import Ledger, Player, SpaceFighter
from .rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from spacefighter.interfaces import INotifier


@dataclass(slots=True)
class UpgradeResult:
    """Values committed by a successful upgrade."""

    gold: int
    health: int
    damage: int


def upgrade_fighter(
    ledger: Ledger,
    capability: AdministrativeCapability,
    fighter: SpaceFighter,
    player: Player,
    *,
    rules: RulesConfig = DEFAULT_RULES,
    notifier: INotifier | None = None,
) -> UpgradeResult:
    """Charge the upgrade cost and raise the fighter's health and damage.

    The deduction and both stat gains are staged in one transaction over the
    player and the fighter: either all three land or none do.
    """

    authorize_admin(capability)
    if fighter.player_id != player.id or player.fighter_id != fighter.id:
        raise OwnershipMismatch(
            "fighter does not belong to player",
            {"fighter_id": int(fighter.id), "player_id": int(player.id)},
        )

    cost = rules.upgrade.cost
    with transaction(player, fighter) as txn:
        if player.gold < cost:
            raise InsufficientGold(
                "not enough gold for upgrade",
                {"player_id": int(player.id), "gold": player.gold, "cost": cost},
            )
        result = UpgradeResult(
            gold=player.gold - cost,
            health=fighter.health + rules.upgrade.health_gain,
            damage=fighter.damage + rules.upgrade.damage_gain,
        )
        txn.stage(player, gold=result.gold)
        txn.stage(fighter, health=result.health, damage=result.damage)

    emit(
        ledger,
        UpgradeApplied(fighter_id=fighter.id, new_health=result.health, new_damage=result.damage),
        notifier,
    )
    return result


def award_gold(
    ledger: Ledger,
    player: Player,
    reward_amount: int,
    *,
    notifier: INotifier | None = None,
) -> int:
    """Credit an externally computed reward and return the new balance."""

    if reward_amount < 0:
        raise ValueError(f"reward must be non-negative, got {reward_amount}")
    with transaction(player) as txn:
        balance = player.gold + reward_amount
        txn.stage(player, gold=balance)

    emit(
        ledger,
        GoldAwarded(player_id=player.id, amount=reward_amount, new_balance=balance),
        notifier,
    )
    return balance
