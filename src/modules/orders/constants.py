"""Order domain constants.

Defines the closed set of order statuses and the transition table used
by ``modules.orders.state_machine``.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    NEW = "NEW", "New"
    PENDING = "PENDING", "Pending"
    PROCESSING = "PROCESSING", "Processing"
    COMPLETED = "COMPLETED", "Completed"
    CANCELLED = "CANCELLED", "Cancelled"
    DELIVERY_EXCEPTION = "DELIVERY_EXCEPTION", "Delivery exception"


VALID_TRANSITIONS: dict[str, frozenset[str]] = {
    OrderStatus.NEW: frozenset({OrderStatus.PENDING, OrderStatus.CANCELLED}),
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset(
        {
            OrderStatus.COMPLETED,
            OrderStatus.DELIVERY_EXCEPTION,
            OrderStatus.CANCELLED,
        }
    ),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
    OrderStatus.DELIVERY_EXCEPTION: frozenset(),
}

TERMINAL_STATES: frozenset[str] = frozenset(
    status for status, targets in VALID_TRANSITIONS.items() if not targets
)

CANCELLABLE_STATES: frozenset[str] = frozenset(
    status
    for status, targets in VALID_TRANSITIONS.items()
    if OrderStatus.CANCELLED in targets
)
