"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-up (unique email
rule) and the ownership check used before deletes.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address (case-insensitive)."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove a customer; ``False`` when it does not exist."""

    @abstractmethod
    def has_orders(self, id: int) -> bool:
        """Whether the customer owns at least one order."""
