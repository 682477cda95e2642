"""Game Service for spacefighter.

Host-facing surface over the domain layer.  Callers address players,
fighters and missiles by identifier; the service resolves them through the
ledger, runs the domain operation, and logs accepted and rejected calls.
Domain errors are re-raised unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from spacefighter.domain import combat, economy, inventory, lifecycle
from spacefighter.domain.capabilities import AdministrativeCapability, OwnershipCapability
from spacefighter.domain.errors import SpaceFighterError
from spacefighter.domain.models import (
    Address,
    FighterID,
    Ledger,
    Missile,
    MissileID,
    Player,
    PlayerID,
    SpaceFighter,
)
from spacefighter.domain.rules_config import DEFAULT_RULES, RulesConfig
from spacefighter.interfaces import ICombatModel, ILeaderboard, INotifier, IRewardRule

logger = logging.getLogger(__name__)


class GameService:
    """Operations exposed to the host, one authorised call at a time."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        notifier: INotifier | None = None,
        combat_model: ICombatModel | None = None,
        reward_rule: IRewardRule | None = None,
        leaderboard: ILeaderboard | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.ledger = ledger
        self.notifier = notifier
        self.rules = rules
        self.combat_model = combat_model or combat.StandardCombatModel(rules.combat)
        self.reward_rule = reward_rule or combat.StandardRewardRule(rules.combat)
        self.leaderboard = leaderboard

    @contextmanager
    def _operation(self, name: str, **context: object) -> Iterator[None]:
        try:
            yield
        except (SpaceFighterError, ValueError) as exc:
            logger.info("%s rejected: %s", name, exc)
            raise
        logger.info("%s ok %s", name, context)

    def get_player(self, player_id: PlayerID) -> Player:
        return self.ledger.get_player(player_id)

    def get_fighter(self, fighter_id: FighterID) -> SpaceFighter:
        return self.ledger.get_fighter(fighter_id)

    def create_player(self, caller: Address) -> lifecycle.AccountBundle:
        with self._operation("create_player", caller=caller):
            return lifecycle.create_player(
                self.ledger, caller, rules=self.rules, notifier=self.notifier
            )

    def rotate_ownership(
        self,
        capability: AdministrativeCapability,
        player_id: PlayerID,
        current: OwnershipCapability,
    ) -> OwnershipCapability:
        player = self.ledger.get_player(player_id)
        with self._operation("rotate_ownership", player=player_id):
            return lifecycle.rotate_ownership(self.ledger, capability, player, current)

    def mint_missile(self) -> Missile:
        missile = inventory.mint_missile(self.ledger, rules=self.rules)
        logger.debug("minted missile %s", missile.id)
        return missile

    def add_missile_to_fighter(
        self,
        capability: OwnershipCapability,
        caller: Address,
        fighter_id: FighterID,
        missile_id: MissileID,
    ) -> None:
        fighter = self.ledger.get_fighter(fighter_id)
        missile = self.ledger.get_missile(missile_id)
        with self._operation("add_missile_to_fighter", fighter=fighter_id, missile=missile_id):
            inventory.add_missile_to_fighter(
                self.ledger,
                capability,
                caller,
                fighter,
                missile,
                rules=self.rules,
                notifier=self.notifier,
            )

    def assign_pilot(
        self,
        capability: OwnershipCapability,
        caller: Address,
        fighter_id: FighterID,
        pilot: str | None,
    ) -> None:
        fighter = self.ledger.get_fighter(fighter_id)
        with self._operation("assign_pilot", fighter=fighter_id):
            inventory.assign_pilot(self.ledger, capability, caller, fighter, pilot)

    def upgrade_fighter(
        self,
        capability: AdministrativeCapability,
        fighter_id: FighterID,
        player_id: PlayerID,
    ) -> economy.UpgradeResult:
        fighter = self.ledger.get_fighter(fighter_id)
        player = self.ledger.get_player(player_id)
        with self._operation("upgrade_fighter", fighter=fighter_id, player=player_id):
            return economy.upgrade_fighter(
                self.ledger,
                capability,
                fighter,
                player,
                rules=self.rules,
                notifier=self.notifier,
            )

    def award_gold(self, player_id: PlayerID, amount: int) -> int:
        player = self.ledger.get_player(player_id)
        with self._operation("award_gold", player=player_id, amount=amount):
            return economy.award_gold(self.ledger, player, amount, notifier=self.notifier)

    def settle_combat(self, player_id: PlayerID, target_health: int) -> combat.CombatSettlement:
        player = self.ledger.get_player(player_id)
        fighter = self.ledger.fighter_of(player)
        with self._operation("settle_combat", player=player_id, target_health=target_health):
            return combat.settle_combat(
                self.ledger,
                player,
                fighter,
                target_health,
                combat_model=self.combat_model,
                reward_rule=self.reward_rule,
                leaderboard=self.leaderboard,
                notifier=self.notifier,
            )
