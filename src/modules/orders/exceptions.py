"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class OrderNotFound(NotFound):
    """The requested order does not exist."""

    entity_name = "Order"


class InvalidOrderState(Exception):
    """A status transition not allowed by the state machine was attempted."""

    def __init__(self, current_status: str, target_status: str) -> None:
        self.current_status = str(current_status)
        self.target_status = str(target_status)
        super().__init__(
            f"Cannot transition order from {self.current_status} "
            f"to {self.target_status}"
        )
