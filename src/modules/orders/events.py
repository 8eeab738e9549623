"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Raised when an order and its lines have been stored."""

    customer_id: int = 0
    line_count: int = 0
    callback_url: Optional[str] = None


@dataclass(frozen=True)
class OrderCancelled(DomainEvent):
    """Raised when an order moves to CANCELLED."""

    previous_status: str = ""
    callback_url: Optional[str] = None
