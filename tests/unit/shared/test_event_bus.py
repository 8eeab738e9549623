"""Unit tests for domain event collection and the in-memory bus."""

from __future__ import annotations

import pytest
from django.db import transaction

from modules.orders.events import OrderCancelled, OrderPlaced
from modules.orders.models import BeerOrder
from shared.domain.bus import IEventBus
from shared.infrastructure.bus import InMemoryEventBus

pytestmark = pytest.mark.unit


class RecordingHandler:
    def __init__(self) -> None:
        self.received = []

    def handle(self, event) -> None:
        self.received.append(event)


def test_order_collects_and_drains_domain_events():
    order = BeerOrder(customer_id=1)
    assert order.domain_events == []

    event = OrderPlaced(aggregate_id=1, customer_id=1, line_count=2)
    order.add_domain_event(event)

    assert order.domain_events == [event]
    assert event.event_name == "OrderPlaced"
    assert order.pull_domain_events() == [event]
    assert order.domain_events == []


def test_publish_dispatches_by_event_type():
    bus = InMemoryEventBus()
    placed, cancelled = RecordingHandler(), RecordingHandler()
    bus.subscribe(OrderPlaced, placed)
    bus.subscribe(OrderCancelled, cancelled)

    bus.publish(OrderPlaced(aggregate_id=5))

    assert [e.aggregate_id for e in placed.received] == [5]
    assert cancelled.received == []


def test_subscribe_is_idempotent_per_handler():
    bus = InMemoryEventBus()
    handler = RecordingHandler()
    bus.subscribe(OrderPlaced, handler)
    bus.subscribe(OrderPlaced, handler)

    bus.publish(OrderPlaced(aggregate_id=1))

    assert len(handler.received) == 1


def test_publish_on_commit_waits_for_commit(django_capture_on_commit_callbacks):
    bus = InMemoryEventBus()
    handler = RecordingHandler()
    bus.subscribe(OrderCancelled, handler)

    with django_capture_on_commit_callbacks(execute=False) as callbacks:
        bus.publish_on_commit([OrderCancelled(aggregate_id=9, previous_status="NEW")])
        assert handler.received == []

    assert len(callbacks) == 1
    callbacks[0]()
    assert handler.received[0].previous_status == "NEW"


def test_publish_on_commit_drops_events_on_rollback(django_capture_on_commit_callbacks):
    bus = InMemoryEventBus()
    handler = RecordingHandler()
    bus.subscribe(OrderPlaced, handler)

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(RuntimeError):
            with transaction.atomic():
                bus.publish_on_commit([OrderPlaced(aggregate_id=3)])
                raise RuntimeError("abort")

    assert callbacks == []
    assert handler.received == []


def test_in_memory_bus_implements_event_bus():
    bus = InMemoryEventBus()
    assert IEventBus in type(bus).__mro__
    for name in ("publish", "publish_on_commit", "subscribe"):
        assert callable(getattr(bus, name))
