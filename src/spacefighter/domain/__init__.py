"""Domain model for the spacefighter ledger.

This package hosts the capability-gated rules layer.  It exposes:

* Dataclasses describing players, fighters and missiles (see :mod:`models`).
* Capability tokens and the authorisation checks (see :mod:`capabilities`).
* Rule configuration objects (see :mod:`rules_config`).
* Operations grouped by concern: :mod:`lifecycle`, :mod:`inventory`,
  :mod:`economy` and :mod:`combat`.

Every operation takes the :class:`~spacefighter.domain.models.Ledger` it
acts on and works purely in memory.
"""

from . import (
    capabilities,
    combat,
    economy,
    enums,
    errors,
    events,
    guard,
    inventory,
    leaderboard,
    lifecycle,
    models,
    rules_config,
)

__all__ = [
    "capabilities",
    "combat",
    "economy",
    "enums",
    "errors",
    "events",
    "guard",
    "inventory",
    "leaderboard",
    "lifecycle",
    "models",
    "rules_config",
]
