"""Event bus and sinks behind the notification boundary.

Events reach the bus only after the mutation that produced them has
committed.  Delivery is best effort: a handler that raises is logged and
skipped, the remaining handlers still run, and the caller of the original
operation never sees the failure.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from spacefighter.domain.enums import EventType
from spacefighter.domain.events import CombatOutcome, DomainEvent, ScoreUpdated

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], None]


class EventBus:
    """Synchronous publish/subscribe with per-handler error isolation."""

    def __init__(self) -> None:
        self._handlers: list[tuple[EventType | None, EventHandler]] = []
        self._lock = threading.Lock()
        self.delivery_failures = 0

    def subscribe(self, handler: EventHandler, kind: EventType | None = None) -> None:
        """Register ``handler`` for one event kind, or every kind when ``None``."""

        with self._lock:
            self._handlers.append((kind, handler))

    def unsubscribe(self, handler: EventHandler) -> None:
        with self._lock:
            self._handlers = [(k, h) for k, h in self._handlers if h != handler]

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            handlers = [h for k, h in self._handlers if k is None or k == event.kind]
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                self.delivery_failures += 1
                logger.exception("event handler %r failed for %s", handler, event.kind)

    def emit_combat_outcome(self, event: CombatOutcome) -> None:
        self.publish(event)

    def emit_score_update(self, event: ScoreUpdated) -> None:
        self.publish(event)


class EventEnvelope(BaseModel):
    """Serialized form of a domain event."""

    type: EventType
    occurred_at: datetime
    payload: dict[str, Any]

    @classmethod
    def from_event(cls, event: DomainEvent) -> EventEnvelope:
        payload = asdict(event)
        occurred_at = payload.pop("occurred_at")
        return cls(type=event.kind, occurred_at=occurred_at, payload=payload)


class JsonlEventSink:
    """Append each event as one JSON line to ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def __call__(self, event: DomainEvent) -> None:
        line = EventEnvelope.from_event(event).model_dump_json()
        with self._lock, self.path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")

    def read(self) -> list[EventEnvelope]:
        """Load every envelope written so far."""

        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [EventEnvelope.model_validate_json(line) for line in handle if line.strip()]
