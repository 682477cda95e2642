"""Protocol-based interfaces for the collaborators the core calls into.

Damage, reward, ranking and telemetry algorithms live outside the ledger.
The core only depends on these protocols; :mod:`spacefighter.domain.combat`,
:mod:`spacefighter.domain.leaderboard` and :mod:`spacefighter.notifications`
ship default implementations, and tests inject plain fakes.
"""

from spacefighter.interfaces.combat import ICombatModel, IRewardRule
from spacefighter.interfaces.leaderboard import ILeaderboard
from spacefighter.interfaces.notifier import INotifier

__all__ = [
    "ICombatModel",
    "ILeaderboard",
    "INotifier",
    "IRewardRule",
]
