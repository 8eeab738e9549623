"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.core.repositories import WriteResult, compare_and_swap, insert
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = ("customer_name", "email", "phone")


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.filter(id=id).first()

    def get_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email__iexact=email.strip()).first()

    def list(self) -> List[Customer]:
        return list(Customer.objects.all())

    @transaction.atomic
    def save(self, entity: Customer) -> WriteResult[Customer]:
        """Insert a new customer or compare-and-swap an existing one."""
        if entity._state.adding:
            result = insert(entity)
        else:
            # normalise the same way Customer.save() does for inserts
            entity.email = entity.email.strip().lower() if entity.email else None
            result = compare_and_swap(entity, MUTABLE_FIELDS)
        logger.info(
            "customer.saved",
            customer_id=entity.id,
            applied=result.applied,
            version=entity.version,
        )
        return result

    @transaction.atomic
    def delete(self, id: int) -> bool:
        deleted, _ = Customer.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted", customer_id=id)
        return bool(deleted)

    def has_orders(self, id: int) -> bool:
        return Customer.objects.filter(id=id, beer_orders__isnull=False).exists()
