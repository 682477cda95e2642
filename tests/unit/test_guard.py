"""Unit tests for the per-object transaction guard."""

from __future__ import annotations

import pytest

from spacefighter.domain.errors import ConcurrentModification
from spacefighter.domain.guard import transaction
from spacefighter.domain.lifecycle import create_player
from spacefighter.domain.models import Address, Ledger


def _bundle():
    return create_player(Ledger(), Address("0xA11CE"))


def test_staged_writes_apply_on_commit():
    bundle = _bundle()

    with transaction(bundle.player, bundle.fighter) as txn:
        txn.stage(bundle.player, gold=7)
        txn.stage(bundle.fighter, health=1, damage=2)
        assert bundle.player.gold == 0

    assert bundle.player.gold == 7
    assert (bundle.fighter.health, bundle.fighter.damage) == (1, 2)
    assert (bundle.player.version, bundle.fighter.version) == (1, 1)


def test_exception_discards_staged_writes():
    bundle = _bundle()

    with pytest.raises(RuntimeError):
        with transaction(bundle.player) as txn:
            txn.stage(bundle.player, gold=99)
            raise RuntimeError("abort")

    assert bundle.player.gold == 0
    assert bundle.player.version == 0


def test_version_change_aborts_commit():
    bundle = _bundle()

    with pytest.raises(ConcurrentModification):
        with transaction(bundle.player) as txn:
            txn.stage(bundle.player, gold=99)
            bundle.player.version += 1  # unguarded writer

    assert bundle.player.gold == 0


def test_stage_rejects_objects_outside_transaction():
    bundle = _bundle()

    with pytest.raises(ValueError, match="not part of this transaction"):
        with transaction(bundle.player) as txn:
            txn.stage(bundle.fighter, health=1)

    assert bundle.fighter.health == 100


def test_duplicate_objects_are_locked_once():
    bundle = _bundle()

    with transaction(bundle.player, bundle.player) as txn:
        txn.stage(bundle.player, gold=3)

    assert bundle.player.version == 1


def test_read_only_participants_keep_their_version():
    bundle = _bundle()

    with transaction(bundle.player, bundle.fighter) as txn:
        txn.stage(bundle.player, gold=1)

    assert bundle.fighter.version == 0
