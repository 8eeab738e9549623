"""Order status state machine.

``transition`` is a pure function over ``VALID_TRANSITIONS``: it never
touches the database and never raises for a disallowed move, it returns
a ``Rejected`` outcome instead.  Callers decide what a rejection means.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from modules.orders.constants import VALID_TRANSITIONS, OrderStatus


@dataclass(frozen=True)
class Transitioned:
    """The move is allowed; ``new_status`` is the status to store."""

    previous_status: OrderStatus
    new_status: OrderStatus


@dataclass(frozen=True)
class Rejected:
    """The move is not allowed from ``current_status``."""

    current_status: OrderStatus
    target_status: OrderStatus

    @property
    def reason(self) -> str:
        return (
            f"Cannot transition order from {self.current_status.value} "
            f"to {self.target_status.value}"
        )


TransitionOutcome = Union[Transitioned, Rejected]


def transition(current: str, target: str) -> TransitionOutcome:
    """Decide whether an order in ``current`` may move to ``target``.

    Both arguments must be valid ``OrderStatus`` values; anything else
    raises ``ValueError``.
    """
    current_status = OrderStatus(current)
    target_status = OrderStatus(target)
    if target_status in VALID_TRANSITIONS[current_status]:
        return Transitioned(previous_status=current_status, new_status=target_status)
    return Rejected(current_status=current_status, target_status=target_status)
