"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CustomerNotFound(NotFound):
    """The referenced customer does not exist."""

    entity_name = "Customer"


class CustomerAlreadyExists(Exception):
    """Another customer already uses the same email address."""


class CustomerHasOrders(Exception):
    """The customer still owns orders and cannot be deleted."""

    def __init__(self, customer_id: int) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer {customer_id} has existing orders.")
