"""Account creation and capability issuance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .capabilities import (
    AdministrativeCapability,
    OwnershipCapability,
    _issue_admin_capability,
    _issue_ownership_capability,
    authorize_admin,
    authorize_owner,
    revoke,
)
from .errors import Unauthorized
from .events import PlayerCreated, emit
from .models import Address, Ledger, Player, SpaceFighter
from .rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from spacefighter.interfaces import INotifier


@dataclass(frozen=True, slots=True)
class AccountBundle:
    """Everything a new account receives, handed over in one piece."""

    player: Player
    fighter: SpaceFighter
    admin_capability: AdministrativeCapability
    ownership_capability: OwnershipCapability


def create_player(
    ledger: Ledger,
    caller: Address,
    *,
    rules: RulesConfig = DEFAULT_RULES,
    notifier: INotifier | None = None,
) -> AccountBundle:
    """Build a player, its fighter and both capabilities as one unit.

    The object graph is assembled off-ledger and registered under the ledger
    lock in a single step, so no other operation can observe a player
    without its fighter or vice versa.
    """

    if not caller:
        raise ValueError("caller identity must be non-empty")

    player_id = ledger.next_player_id()
    fighter_id = ledger.next_fighter_id()
    fighter = SpaceFighter(
        id=fighter_id,
        player_id=player_id,
        health=rules.fighter.initial_health,
        damage=rules.fighter.initial_damage,
    )
    player = Player(
        id=player_id,
        address=caller,
        fighter_id=fighter_id,
        level=rules.player.initial_level,
        gold=rules.player.initial_gold,
    )
    bundle = AccountBundle(
        player=player,
        fighter=fighter,
        admin_capability=_issue_admin_capability(),
        ownership_capability=_issue_ownership_capability(caller, player_id),
    )

    with ledger.lock:
        ledger.fighters[fighter.id] = fighter
        ledger.players[player.id] = player
        ledger.owner_tokens[player.id] = bundle.ownership_capability.token_id

    emit(
        ledger,
        PlayerCreated(player_id=player.id, fighter_id=fighter.id, address=caller),
        notifier,
    )
    return bundle


def rotate_ownership(
    ledger: Ledger,
    admin_capability: AdministrativeCapability,
    player: Player,
    current: OwnershipCapability,
) -> OwnershipCapability:
    """Revoke ``current`` and issue a fresh ownership token for ``player``.

    Keeps the one-live-token-per-player invariant: the old handle stops
    authorising anything the moment the new one exists.
    """

    authorize_admin(admin_capability)
    authorize_owner(current, player.address, player)
    with ledger.lock, player.lock:
        if ledger.owner_tokens.get(player.id) != current.token_id:
            raise Unauthorized(
                "ownership capability is not the live token for this player",
                {"player_id": int(player.id)},
            )
        replacement = _issue_ownership_capability(player.address, player.id)
        ledger.owner_tokens[player.id] = replacement.token_id
        revoke(current)
    return replacement
