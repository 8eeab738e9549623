"""Beer repository interface.

Extends ``IRepository[Beer]`` with the checks needed by plain CRUD.
The order components only use ``get_by_id`` (Beer Lookup).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.beers.models import Beer


class IBeerRepository(IRepository["Beer"]):
    """Repository contract for the Beer aggregate."""

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove a beer; ``False`` when it does not exist."""

    @abstractmethod
    def is_referenced(self, id: int) -> bool:
        """Whether any order line points at the beer."""
