"""Beer model (the products sold by the brewery).

Business rules implemented:
- Price must be greater than zero.
- Quantity on hand cannot be negative.
- A beer referenced by order lines cannot be deleted (PROTECT on the FK).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Beer(BaseModel):
    """Catalogue entry referenced read-only by order lines."""

    beer_name = models.CharField(max_length=255)
    beer_style = models.CharField(max_length=100)
    upc = models.CharField(max_length=64)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    quantity_on_hand = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "beers"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="beers_price_positive",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be positive."})

    def __str__(self) -> str:
        return f"{self.beer_name} ({self.beer_style})"
