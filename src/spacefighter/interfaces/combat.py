"""Combat Collaborator Protocol Interfaces.

Pure functions consumed by combat settlement: damage resolution and the
gold reward granted for an outcome.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from spacefighter.domain.combat import CombatReport


class ICombatModel(Protocol):
    """Protocol for damage and win resolution."""

    def calculate_damage(self, level: int, base: int) -> int:
        """Return the damage a fighter deals.

        Args:
            level: Level of the player flying the fighter
            base: Fighter damage plus the damage of every attached missile

        Returns:
            Non-negative damage value
        """
        ...

    def is_player_winning(self, player_damage: int, target_health: int) -> bool:
        """Return True when ``player_damage`` defeats a target of ``target_health``."""
        ...


class IRewardRule(Protocol):
    """Protocol for the gold reward calculation."""

    def calculate_gold_reward(self, outcome: "CombatReport") -> int:
        """Return the non-negative gold granted for ``outcome``."""
        ...
