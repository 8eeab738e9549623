"""Customer model.

Business rules implemented:
- Name is required.
- Email is optional but unique when present (stored as NULL when absent,
  so several customers without email do not collide).
- A customer owning orders cannot be deleted (PROTECT on the order FK).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root; owns its orders through ``beer_orders``."""

    customer_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True, null=True, blank=True)
    phone = models.CharField(max_length=30, blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def save(self, *args, **kwargs) -> None:
        if self.email:
            self.email = self.email.strip().lower()
        else:
            self.email = None
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.customer_name
