"""Service layer for the spacefighter core.

Architecture:
    - GameService: identifier-based host surface over the domain operations

Production Usage:
    from spacefighter.factory import create_game_service
    service = create_game_service()
    bundle = service.create_player(Address("0xA11CE"))

Testing Usage:
    from spacefighter.domain.models import Ledger
    from spacefighter.services import GameService

    class FakeNotifier:
        def __init__(self):
            self.events = []

        def publish(self, event):
            self.events.append(event)

        emit_combat_outcome = emit_score_update = publish

    service = GameService(Ledger(), notifier=FakeNotifier())
"""

from spacefighter.services.game_service import GameService

__all__ = ["GameService"]
