"""Domain exceptions raised by the ledger operations.

Every exception carries a human-readable ``message`` and a ``details`` dict
with the identifiers involved, so callers can log or translate failures
without parsing strings.  A raised exception always means the operation
left every object untouched.
"""

from __future__ import annotations

from typing import Any


class SpaceFighterError(Exception):
    """Base class for all domain failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class Unauthorized(SpaceFighterError):
    """Capability missing, revoked, forged or bound to someone else."""


class InventoryFull(SpaceFighterError):
    """Fighter already carries the maximum number of missiles."""


class InsufficientGold(SpaceFighterError):
    """Player cannot afford the requested deduction."""


class MissileUnavailable(SpaceFighterError):
    """Missile was never minted by this ledger or is already attached."""


class OwnershipMismatch(SpaceFighterError):
    """Fighter and player passed together do not belong to each other."""


class ObjectNotFound(SpaceFighterError, LookupError):
    """No object with the requested identifier exists in the ledger."""


class ConcurrentModification(SpaceFighterError):
    """An object changed underneath a guarded operation."""
