"""Service Factory for spacefighter.

This module provides factory functions for creating service instances with
proper dependency wiring. Use these functions in production code to ensure
the event bus, sinks and leaderboard are correctly initialized.

For testing, inject protocol-based fakes instead of using these factories.

Example:
    # Production usage
    from spacefighter.factory import create_game_service
    service = create_game_service()

    # Testing usage
    from spacefighter.domain.models import Ledger
    from spacefighter.services import GameService

    service = GameService(Ledger(), notifier=FakeNotifier())
"""

from spacefighter.config import Settings, configure_logging, get_settings
from spacefighter.domain.leaderboard import Leaderboard
from spacefighter.domain.models import Ledger
from spacefighter.domain.rules_config import DEFAULT_RULES, RulesConfig
from spacefighter.notifications import EventBus, JsonlEventSink
from spacefighter.services.game_service import GameService


def create_event_bus(settings: Settings) -> EventBus:
    """Create an EventBus, attaching the JSON-lines sink when configured.

    Args:
        settings: Application settings

    Returns:
        EventBus instance
    """
    bus = EventBus()
    if settings.event_log_path is not None:
        bus.subscribe(JsonlEventSink(settings.event_log_path))
    return bus


def create_game_service(
    settings: Settings | None = None,
    *,
    ledger: Ledger | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> GameService:
    """Create a GameService with all dependencies.

    Args:
        settings: Application settings (defaults to the cached instance)
        ledger: Existing ledger to operate on (defaults to an empty one)
        rules: Rule constants

    Returns:
        GameService instance wired with an EventBus and a Leaderboard
    """
    settings = settings or get_settings()
    configure_logging(settings)
    return GameService(
        ledger if ledger is not None else Ledger(),
        notifier=create_event_bus(settings),
        leaderboard=Leaderboard(settings.leaderboard_size),
        rules=rules,
    )
