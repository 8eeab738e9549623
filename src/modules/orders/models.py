"""BeerOrder and BeerOrderLine models.

Business rules implemented:
- An order always references an existing customer (PROTECT FK, set once).
- Order lines are exclusively owned by their order (CASCADE).
- Lines reference beers with PROTECT: a beer used by an order cannot
  be deleted.
- ``order_quantity`` is at least 1 (validator + DB check constraint).
"""

from __future__ import annotations

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import OrderStatus
from shared.domain.events import DomainEventMixin


class BeerOrder(DomainEventMixin, BaseModel):
    """Order aggregate root.

    ``customer`` is fixed at creation; only ``order_status`` (and the
    callback URL) change afterwards, through the order repository's
    compare-and-swap write.
    """

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="beer_orders",
    )
    order_status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.NEW,
    )
    order_status_callback_url = models.URLField(max_length=500, null=True, blank=True)

    class Meta:
        db_table = "beer_orders"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["order_status"], name="beer_orders_status_idx"),
        ]

    def __str__(self) -> str:
        return f"BeerOrder {self.pk} ({self.order_status})"


class BeerOrderLine(BaseModel):
    """Line linking a BeerOrder to a Beer with the ordered quantity."""

    beer_order = models.ForeignKey(
        "orders.BeerOrder",
        on_delete=models.CASCADE,
        related_name="beer_order_lines",
    )
    beer = models.ForeignKey(
        "beers.Beer",
        on_delete=models.PROTECT,
        related_name="order_lines",
    )
    order_quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = "beer_order_lines"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(order_quantity__gte=1),
                name="beer_order_lines_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.beer_id} x{self.order_quantity}"
