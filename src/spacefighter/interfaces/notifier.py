"""Notifier Protocol Interface.

Receives committed domain events.  Implementations must treat delivery as
best effort: a failure to deliver is never reported back as a failure of
the operation that produced the event.
"""

from typing import Protocol

from spacefighter.domain.events import CombatOutcome, DomainEvent, ScoreUpdated


class INotifier(Protocol):
    """Protocol for the event consumer boundary."""

    def publish(self, event: DomainEvent) -> None:
        """Deliver ``event`` to every interested consumer."""
        ...

    def emit_combat_outcome(self, event: CombatOutcome) -> None:
        """Fire-and-forget combat telemetry."""
        ...

    def emit_score_update(self, event: ScoreUpdated) -> None:
        """Fire-and-forget score telemetry."""
        ...
