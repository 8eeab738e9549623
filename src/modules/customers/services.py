"""Customer service layer (plain CRUD).

Business rules enforced:
- Email is unique across customers (case-insensitive).
- A customer that owns orders cannot be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.core.exceptions import ConcurrentModification
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CustomerDTO) -> Customer:
        """Register a new customer.

        Raises:
            CustomerAlreadyExists: the email is already taken.
        """
        self._ensure_email_available(dto.email)

        customer = Customer(
            customer_name=dto.customer_name,
            email=dto.email,
            phone=dto.phone,
        )
        customer = self._repo.save(customer).entity
        logger.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: CustomerDTO) -> Customer:
        """Replace the editable fields of an existing customer.

        Raises:
            CustomerNotFound: the customer does not exist.
            CustomerAlreadyExists: the email belongs to another customer.
            ConcurrentModification: the stored version moved on.
        """
        customer = self._repo.get_by_id(id)
        if customer is None:
            raise CustomerNotFound(id)

        self._ensure_email_available(dto.email, exclude_id=id)

        if dto.version is not None:
            customer.version = dto.version
        customer.customer_name = dto.customer_name
        customer.email = dto.email
        customer.phone = dto.phone

        result = self._repo.save(customer)
        if result.conflict:
            raise ConcurrentModification("Customer", id, result.expected_version)
        logger.info("customer.updated", customer_id=id, version=customer.version)
        return result.entity

    @transaction.atomic
    def delete_customer(self, id: int) -> bool:
        """Delete a customer; ``False`` when it does not exist.

        Raises:
            CustomerHasOrders: the customer still owns orders.
        """
        if self._repo.get_by_id(id) is None:
            return False
        if self._repo.has_orders(id):
            logger.warning("customer.delete_rejected", customer_id=id)
            raise CustomerHasOrders(id)
        return self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_customer(self, id: int) -> Optional[Customer]:
        return self._repo.get_by_id(id)

    def get_customer_by_email(self, email: str) -> Optional[Customer]:
        return self._repo.get_by_email(email)

    def list_customers(self) -> List[Customer]:
        return self._repo.list()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _ensure_email_available(
        self, email: Optional[str], exclude_id: Optional[int] = None
    ) -> None:
        if not email:
            return
        existing = self._repo.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise CustomerAlreadyExists(f"Email {email} is already registered.")
