"""Django ORM implementation of the Beer repository.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.beers.models import Beer
from modules.beers.repositories.interfaces import IBeerRepository
from modules.core.repositories import WriteResult, compare_and_swap, insert

logger = structlog.get_logger(__name__)

MUTABLE_FIELDS = ("beer_name", "beer_style", "upc", "price", "quantity_on_hand")


class BeerDjangoRepository(IBeerRepository):
    """Concrete Beer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Beer]:
        return Beer.objects.filter(id=id).first()

    def list(self) -> List[Beer]:
        return list(Beer.objects.all())

    @transaction.atomic
    def save(self, entity: Beer) -> WriteResult[Beer]:
        """Insert a new beer or compare-and-swap an existing one."""
        if entity._state.adding:
            result = insert(entity)
        else:
            result = compare_and_swap(entity, MUTABLE_FIELDS)
        logger.info(
            "beer.saved",
            beer_id=entity.id,
            applied=result.applied,
            version=entity.version,
        )
        return result

    @transaction.atomic
    def delete(self, id: int) -> bool:
        deleted, _ = Beer.objects.filter(id=id).delete()
        if deleted:
            logger.info("beer.deleted", beer_id=id)
        return bool(deleted)

    def is_referenced(self, id: int) -> bool:
        return Beer.objects.filter(id=id, order_lines__isnull=False).exists()
