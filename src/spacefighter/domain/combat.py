"""Combat settlement against the external damage and reward collaborators.

The ledger does not decide who wins a fight.  It gathers the inputs a
combat model needs (level, fighter damage plus missile payload), asks the
collaborators for the outcome and the reward, and then credits gold and
score to the player in a single transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import CombatResult
from .errors import OwnershipMismatch
from .events import CombatOutcome, GoldAwarded, ScoreUpdated, emit
from .guard import transaction
from .models import LeaderboardEntry, Ledger, Player, PlayerID, SpaceFighter
from .rules_config import DEFAULT_RULES, CombatRules

if TYPE_CHECKING:
    from spacefighter.interfaces import ICombatModel, ILeaderboard, INotifier, IRewardRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CombatReport:
    """Outcome handed to the reward rule."""

    player_id: PlayerID
    damage_dealt: int
    target_health: int
    result: CombatResult


@dataclass(slots=True)
class CombatSettlement:
    """Returned once rewards and score are committed."""

    report: CombatReport
    reward: int
    gold: int
    score: int


class StandardCombatModel:
    """Default damage model: flat bonus per level above the first."""

    def __init__(self, rules: CombatRules = DEFAULT_RULES.combat) -> None:
        self._rules = rules

    def calculate_damage(self, level: int, base: int) -> int:
        return max(0, base + self._rules.level_damage_bonus * max(0, level - 1))

    def is_player_winning(self, player_damage: int, target_health: int) -> bool:
        return player_damage >= target_health


class StandardRewardRule:
    """Default reward rule: fixed purse for a win, consolation for a loss."""

    def __init__(self, rules: CombatRules = DEFAULT_RULES.combat) -> None:
        self._rules = rules

    def calculate_gold_reward(self, outcome: CombatReport) -> int:
        if outcome.result is CombatResult.WIN:
            return self._rules.win_reward
        return self._rules.loss_reward


def settle_combat(
    ledger: Ledger,
    player: Player,
    fighter: SpaceFighter,
    target_health: int,
    *,
    combat_model: ICombatModel,
    reward_rule: IRewardRule,
    leaderboard: ILeaderboard | None = None,
    notifier: INotifier | None = None,
) -> CombatSettlement:
    """Resolve one engagement and credit the player."""

    if target_health < 0:
        raise ValueError(f"target_health must be non-negative, got {target_health}")
    if fighter.player_id != player.id or player.fighter_id != fighter.id:
        raise OwnershipMismatch(
            "fighter does not belong to player",
            {"fighter_id": int(fighter.id), "player_id": int(player.id)},
        )

    with transaction(player, fighter) as txn:
        base = fighter.damage + sum(missile.damage for missile in fighter.missiles)
        damage = combat_model.calculate_damage(player.level, base)
        won = combat_model.is_player_winning(damage, target_health)
        report = CombatReport(
            player_id=player.id,
            damage_dealt=damage,
            target_health=target_health,
            result=CombatResult.WIN if won else CombatResult.LOSS,
        )
        reward = reward_rule.calculate_gold_reward(report)
        if reward < 0:
            raise ValueError(f"reward rule returned a negative reward: {reward}")
        gold = player.gold + reward
        score = player.score + reward
        txn.stage(player, gold=gold, score=score)

    if leaderboard is not None:
        try:
            leaderboard.update_leaderboard(LeaderboardEntry(player_id=player.id, score=score))
        except Exception:
            logger.exception("leaderboard update failed for player %s", player.id)
    if reward:
        emit(ledger, GoldAwarded(player_id=player.id, amount=reward, new_balance=gold), notifier)
    emit(
        ledger,
        CombatOutcome(
            player_id=player.id,
            fighter_id=fighter.id,
            damage_dealt=damage,
            target_health=target_health,
            result=report.result,
            reward=reward,
        ),
        notifier,
    )
    emit(ledger, ScoreUpdated(player_id=player.id, score=score), notifier)
    return CombatSettlement(report=report, reward=reward, gold=gold, score=score)
