"""Unit tests for the event bus and the JSON-lines sink."""

from __future__ import annotations

import logging

from spacefighter.domain import economy, inventory
from spacefighter.domain.enums import EventType
from spacefighter.domain.events import ScoreUpdated, UpgradeApplied
from spacefighter.domain.lifecycle import create_player
from spacefighter.domain.models import Address, FighterID, Ledger, PlayerID
from spacefighter.notifications import EventBus, EventEnvelope, JsonlEventSink

ALICE = Address("0xA11CE")


def _explode(event):
    raise RuntimeError("consumer down")


def test_handlers_receive_matching_events():
    bus = EventBus()
    everything: list = []
    upgrades: list = []
    bus.subscribe(everything.append)
    bus.subscribe(upgrades.append, EventType.UPGRADE_APPLIED)

    bus.publish(ScoreUpdated(player_id=PlayerID(1), score=3))
    bus.publish(UpgradeApplied(fighter_id=FighterID(1), new_health=130, new_damage=35))

    assert len(everything) == 2
    assert [type(event) for event in upgrades] == [UpgradeApplied]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received: list = []
    bus.subscribe(received.append)
    bus.unsubscribe(received.append)

    bus.publish(ScoreUpdated(player_id=PlayerID(1), score=3))

    assert received == []


def test_failing_handler_is_isolated(caplog):
    bus = EventBus()
    received: list = []
    bus.subscribe(_explode)
    bus.subscribe(received.append)

    with caplog.at_level(logging.ERROR, logger="spacefighter.notifications"):
        bus.publish(ScoreUpdated(player_id=PlayerID(1), score=3))

    assert len(received) == 1
    assert bus.delivery_failures == 1
    assert "consumer down" in caplog.text


def test_failing_handler_does_not_roll_back_upgrade():
    ledger = Ledger()
    bundle = create_player(ledger, ALICE)
    bundle.player.gold = 30
    bus = EventBus()
    bus.subscribe(_explode)

    economy.upgrade_fighter(
        ledger, bundle.admin_capability, bundle.fighter, bundle.player, notifier=bus
    )

    assert bundle.player.gold == 0
    assert bundle.fighter.health == 130
    assert isinstance(ledger.events[-1], UpgradeApplied)


def test_missile_attach_reaches_bus():
    ledger = Ledger()
    bundle = create_player(ledger, ALICE)
    bus = EventBus()
    received: list = []
    bus.subscribe(received.append, EventType.MISSILE_ATTACHED)
    missile = inventory.mint_missile(ledger)

    inventory.add_missile_to_fighter(
        ledger, bundle.ownership_capability, ALICE, bundle.fighter, missile, notifier=bus
    )

    assert len(received) == 1
    assert received[0].missile_id == missile.id


def test_jsonl_sink_writes_envelopes(tmp_path):
    sink = JsonlEventSink(tmp_path / "events" / "log.jsonl")
    bus = EventBus()
    bus.subscribe(sink)

    bus.publish(UpgradeApplied(fighter_id=FighterID(4), new_health=130, new_damage=35))
    bus.publish(ScoreUpdated(player_id=PlayerID(2), score=10))

    envelopes = sink.read()
    assert [envelope.type for envelope in envelopes] == [
        EventType.UPGRADE_APPLIED,
        EventType.SCORE_UPDATED,
    ]
    assert envelopes[0].payload == {"fighter_id": 4, "new_health": 130, "new_damage": 35}


def test_envelope_round_trips_through_json():
    event = ScoreUpdated(player_id=PlayerID(9), score=42)

    envelope = EventEnvelope.from_event(event)
    restored = EventEnvelope.model_validate_json(envelope.model_dump_json())

    assert restored.type is EventType.SCORE_UPDATED
    assert restored.payload == {"player_id": 9, "score": 42}
    assert restored.occurred_at == event.occurred_at


def test_read_without_file_returns_empty(tmp_path):
    assert JsonlEventSink(tmp_path / "missing.jsonl").read() == []
