"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
Creation wraps the order and its lines in ``transaction.atomic()`` so the
aggregate is stored entirely or not at all.  Status updates go through
``compare_and_swap`` on ``version``; no row locks are taken.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import structlog
from django.db import transaction
from django.db.models import QuerySet

from modules.core.repositories import WriteResult, compare_and_swap, insert
from modules.orders.models import BeerOrder, BeerOrderLine
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = ("order_status", "order_status_callback_url")


def _with_lines() -> QuerySet[BeerOrder]:
    return BeerOrder.objects.select_related("customer").prefetch_related(
        "beer_order_lines__beer"
    )


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, order: BeerOrder, lines: Sequence[BeerOrderLine]) -> BeerOrder:
        """Insert ``order`` then each line in the given order."""
        insert(order)
        for line in lines:
            line.beer_order = order
            insert(line)

        logger.info("order.stored", order_id=order.id, line_count=len(lines))
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[BeerOrder]:
        """Retrieve an order with its customer and lines (with beers) loaded.

        Returns ``None`` for non-existent IDs.
        """
        return _with_lines().filter(id=id).first()

    def list(self) -> List[BeerOrder]:
        return list(_with_lines())

    def list_by_customer(self, customer_id: int) -> List[BeerOrder]:
        return list(_with_lines().filter(customer_id=customer_id))

    # ------------------------------------------------------------------
    # Save (IRepository contract)
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, entity: BeerOrder) -> WriteResult[BeerOrder]:
        """Insert a new order or compare-and-swap its mutable fields."""
        if entity._state.adding:
            result = insert(entity)
        else:
            result = compare_and_swap(entity, MUTABLE_FIELDS)
        logger.info(
            "order.saved",
            order_id=entity.id,
            applied=result.applied,
            version=entity.version,
        )
        return result
