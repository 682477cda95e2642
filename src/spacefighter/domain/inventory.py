"""Missile minting and fighter inventory rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .capabilities import OwnershipCapability, authorize_owner
from .errors import InventoryFull, MissileUnavailable
from .events import MissileAttached, emit
from .guard import transaction
from .models import Address, Ledger, Missile, SpaceFighter
from .rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from spacefighter.interfaces import INotifier


def mint_missile(ledger: Ledger, *, rules: RulesConfig = DEFAULT_RULES) -> Missile:
    """Create a free-standing missile.  Touches no player or fighter."""

    missile = Missile(id=ledger.next_missile_id(), damage=rules.missile.damage)
    with ledger.lock:
        ledger.missiles[missile.id] = missile
    return missile


def add_missile_to_fighter(
    ledger: Ledger,
    capability: OwnershipCapability,
    caller: Address,
    fighter: SpaceFighter,
    missile: Missile,
    *,
    rules: RulesConfig = DEFAULT_RULES,
    notifier: INotifier | None = None,
) -> None:
    """Move ``missile`` out of the free pool into ``fighter``'s inventory.

    Raises:
        Unauthorized: ``caller`` does not hold ownership of the fighter
        InventoryFull: the fighter already carries the maximum
        MissileUnavailable: the missile is attached elsewhere or unknown
    """

    authorize_owner(capability, caller, fighter)

    # ledger lock first: it also guards the free pool the missile leaves
    with ledger.lock:
        with transaction(fighter) as txn:
            if len(fighter.missiles) >= rules.fighter.max_missiles:
                raise InventoryFull(
                    "fighter inventory is full",
                    {"fighter_id": int(fighter.id), "max_missiles": rules.fighter.max_missiles},
                )
            if ledger.missiles.get(missile.id) is not missile:
                raise MissileUnavailable(
                    "missile is not available for attachment", {"missile_id": int(missile.id)}
                )
            txn.stage(fighter, missiles=[*fighter.missiles, missile])
        del ledger.missiles[missile.id]
        count = len(fighter.missiles)

    emit(
        ledger,
        MissileAttached(fighter_id=fighter.id, missile_id=missile.id, missile_count=count),
        notifier,
    )


def assign_pilot(
    ledger: Ledger,
    capability: OwnershipCapability,
    caller: Address,
    fighter: SpaceFighter,
    pilot: str | None,
) -> None:
    """Set or clear the optional pilot reference on an owned fighter."""

    authorize_owner(capability, caller, fighter)
    if pilot is not None and not pilot.strip():
        raise ValueError("pilot name must be non-empty")
    with transaction(fighter) as txn:
        txn.stage(fighter, pilot=pilot)
