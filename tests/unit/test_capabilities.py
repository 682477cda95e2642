"""Unit tests for capability tokens and authorisation checks."""

from __future__ import annotations

import copy
import pickle

import pytest

from spacefighter.domain import capabilities
from spacefighter.domain.capabilities import (
    AdministrativeCapability,
    OwnershipCapability,
    authorize_admin,
    authorize_owner,
)
from spacefighter.domain.errors import Unauthorized
from spacefighter.domain.lifecycle import create_player
from spacefighter.domain.models import Address, Ledger

ALICE = Address("0xA11CE")
BOB = Address("0xB0B")


class TestConstruction:
    """Capabilities cannot be fabricated or duplicated."""

    def test_admin_capability_has_no_public_constructor(self):
        with pytest.raises(TypeError):
            AdministrativeCapability(_key=object())

    def test_ownership_capability_has_no_public_constructor(self):
        with pytest.raises(TypeError):
            OwnershipCapability(_key=None, bound_address=ALICE, player_id=1)

    def test_copy_and_deepcopy_are_refused(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(TypeError):
            copy.copy(bundle.admin_capability)
        with pytest.raises(TypeError):
            copy.deepcopy(bundle.ownership_capability)

    def test_pickling_is_refused(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(TypeError):
            pickle.dumps(bundle.admin_capability)

    def test_bound_address_is_read_only(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(AttributeError):
            bundle.ownership_capability.bound_address = BOB

    def test_instance_built_without_init_is_not_genuine(self):
        forged = object.__new__(AdministrativeCapability)

        with pytest.raises(Unauthorized):
            authorize_admin(forged)

    def test_module_exposes_no_public_issuer(self):
        public = [name for name in dir(capabilities) if not name.startswith("_")]

        assert not [name for name in public if "issue" in name]


class TestAuthorizeAdmin:
    def test_accepts_issued_token(self):
        bundle = create_player(Ledger(), ALICE)

        assert authorize_admin(bundle.admin_capability) is bundle.admin_capability

    @pytest.mark.parametrize("presented", [None, "admin", 42])
    def test_rejects_non_capabilities(self, presented):
        with pytest.raises(Unauthorized):
            authorize_admin(presented)

    def test_rejects_ownership_token(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(Unauthorized):
            authorize_admin(bundle.ownership_capability)

    def test_rejects_revoked_token(self):
        bundle = create_player(Ledger(), ALICE)
        capabilities.revoke(bundle.admin_capability)
        capabilities.revoke(bundle.admin_capability)

        assert bundle.admin_capability.revoked is True
        with pytest.raises(Unauthorized):
            authorize_admin(bundle.admin_capability)


class TestAuthorizeOwner:
    def test_accepts_bound_caller_for_player_and_fighter(self):
        bundle = create_player(Ledger(), ALICE)
        token = bundle.ownership_capability

        assert authorize_owner(token, ALICE, bundle.player) is token
        assert authorize_owner(token, ALICE, bundle.fighter) is token

    def test_rejects_other_caller(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(Unauthorized) as excinfo:
            authorize_owner(bundle.ownership_capability, BOB, bundle.fighter)

        assert excinfo.value.details == {"caller": BOB, "bound_address": ALICE}

    def test_rejects_token_for_another_players_fighter(self):
        ledger = Ledger()
        alice = create_player(ledger, ALICE)
        second = create_player(ledger, ALICE)

        with pytest.raises(Unauthorized):
            authorize_owner(alice.ownership_capability, ALICE, second.fighter)

    def test_rejects_admin_token(self):
        bundle = create_player(Ledger(), ALICE)

        with pytest.raises(Unauthorized):
            authorize_owner(bundle.admin_capability, ALICE, bundle.player)

    def test_checks_have_no_side_effects(self):
        bundle = create_player(Ledger(), ALICE)
        before = (bundle.player.version, bundle.fighter.version)

        with pytest.raises(Unauthorized):
            authorize_owner(bundle.ownership_capability, BOB, bundle.fighter)

        assert (bundle.player.version, bundle.fighter.version) == before
        assert bundle.ownership_capability.revoked is False
