"""Order repository interface.

Extends ``IRepository[BeerOrder]`` with the methods required by the
order aggregate: atomic creation with lines and per-customer listing.

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Sequence

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import BeerOrder, BeerOrderLine


class IOrderRepository(IRepository["BeerOrder"]):
    """Repository contract for the BeerOrder aggregate root.

    The aggregate includes its BeerOrderLine children; creation must
    store the order and every line or nothing at all.
    """

    @abstractmethod
    def create(self, order: BeerOrder, lines: Sequence[BeerOrderLine]) -> BeerOrder:
        """Persist a new order together with its lines atomically."""

    @abstractmethod
    def list_by_customer(self, customer_id: int) -> List[BeerOrder]:
        """Orders owned by ``customer_id``, in insertion order."""
