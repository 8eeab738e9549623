"""Event bus contracts used by the order services.

Services depend on ``IEventBus`` only; the in-process implementation lives
in ``shared.infrastructure.bus``.
"""

from __future__ import annotations

from typing import Generic, Iterable, Protocol, Type, TypeVar

from shared.domain.events import DomainEvent

E = TypeVar("E", bound=DomainEvent, contravariant=True)


class IEventHandler(Protocol, Generic[E]):
    """Reacts to one kind of order event (placed, cancelled)."""

    def handle(self, event: E) -> None: ...


class IEventBus(Protocol):
    """Routes order events to the handlers subscribed to their class."""

    def publish(self, event: DomainEvent) -> None: ...

    def publish_on_commit(self, events: Iterable[DomainEvent]) -> None:
        """Publish ``events`` once the current transaction commits.

        Nothing is delivered if the transaction rolls back.
        """
        ...

    def subscribe(self, event_class: Type[E], handler: IEventHandler[E]) -> None: ...
