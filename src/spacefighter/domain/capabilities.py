"""Capability tokens and the proof-of-possession checks.

A capability is an opaque handle: it cannot be built outside this module's
issuing functions, cannot be copied or pickled, and compares by identity.
Holding the object is the proof of authority.  Genuineness is checked
against the set of tokens this process issued, so an instance conjured
through ``object.__new__`` is rejected just like a revoked one.
"""

from __future__ import annotations

import uuid
import weakref
from typing import NoReturn

from .errors import Unauthorized
from .models import Address, Player, PlayerID, SpaceFighter

_ISSUE_KEY = object()
_ISSUED: weakref.WeakSet[_Capability] = weakref.WeakSet()


class _Capability:
    __slots__ = ("token_id", "_revoked", "__weakref__")

    def __init__(self, *, _key: object) -> None:
        if _key is not _ISSUE_KEY:
            raise TypeError(f"{type(self).__name__} can only be issued by the lifecycle manager")
        self.token_id = uuid.uuid4()
        self._revoked = False
        _ISSUED.add(self)

    @property
    def revoked(self) -> bool:
        return self._revoked

    def _refuse_copy(self, *args: object) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be duplicated")

    __copy__ = _refuse_copy
    __deepcopy__ = _refuse_copy
    __reduce__ = _refuse_copy
    __reduce_ex__ = _refuse_copy

    def __repr__(self) -> str:
        state = "revoked" if self._revoked else "active"
        return f"<{type(self).__name__} {self.token_id.hex[:8]} {state}>"


class AdministrativeCapability(_Capability):
    """Token identifying the holder as the game administrator."""

    __slots__ = ()


class OwnershipCapability(_Capability):
    """Token binding an address to one player's assets."""

    __slots__ = ("_bound_address", "_player_id")

    def __init__(self, *, _key: object, bound_address: Address, player_id: PlayerID) -> None:
        super().__init__(_key=_key)
        self._bound_address = bound_address
        self._player_id = player_id

    @property
    def bound_address(self) -> Address:
        return self._bound_address

    @property
    def player_id(self) -> PlayerID:
        return self._player_id


def _issue_admin_capability() -> AdministrativeCapability:
    return AdministrativeCapability(_key=_ISSUE_KEY)


def _issue_ownership_capability(
    bound_address: Address, player_id: PlayerID
) -> OwnershipCapability:
    return OwnershipCapability(_key=_ISSUE_KEY, bound_address=bound_address, player_id=player_id)


def revoke(capability: _Capability) -> None:
    """Invalidate a capability.  Revoking twice is a no-op."""

    capability._revoked = True


def _is_genuine(capability: object, kind: type[_Capability]) -> bool:
    return (
        isinstance(capability, kind)
        and capability in _ISSUED
        and not capability.revoked
    )


def authorize_admin(capability: object) -> AdministrativeCapability:
    """Raise ``Unauthorized`` unless ``capability`` is a live admin token."""

    if not _is_genuine(capability, AdministrativeCapability):
        raise Unauthorized(
            "administrative capability required",
            {"presented": type(capability).__name__},
        )
    return capability  # type: ignore[return-value]


def authorize_owner(
    capability: object,
    caller: Address,
    target: Player | SpaceFighter,
) -> OwnershipCapability:
    """Raise ``Unauthorized`` unless ``caller`` may act on ``target``.

    The token must be a live ownership capability, bound to ``caller``, and
    issued for the player that owns ``target``.
    """

    if not _is_genuine(capability, OwnershipCapability):
        raise Unauthorized(
            "ownership capability required",
            {"presented": type(capability).__name__},
        )
    if capability.bound_address != caller:
        raise Unauthorized(
            "caller is not the bound owner",
            {"caller": caller, "bound_address": capability.bound_address},
        )
    owner_id = target.id if isinstance(target, Player) else target.player_id
    if capability.player_id != owner_id:
        raise Unauthorized(
            "capability does not cover this player",
            {"capability_player_id": int(capability.player_id), "target_player_id": int(owner_id)},
        )
    return capability
