"""Beer service layer (plain CRUD).

Look-ups return ``None`` for unknown ids rather than raising; the
order use-cases are the ones that turn absence into a hard failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.beers.exceptions import BeerInUse, BeerNotFound
from modules.beers.models import Beer
from modules.core.exceptions import ConcurrentModification

if TYPE_CHECKING:
    from modules.beers.dtos import BeerDTO
    from modules.beers.repositories.interfaces import IBeerRepository

logger = structlog.get_logger(__name__)


class BeerService:
    """Application service for Beer use-cases.

    Receives an ``IBeerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IBeerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_beer(self, dto: BeerDTO) -> Beer:
        beer = Beer(
            beer_name=dto.beer_name,
            beer_style=dto.beer_style,
            upc=dto.upc,
            price=dto.price,
            quantity_on_hand=dto.quantity_on_hand,
        )
        beer = self._repo.save(beer).entity
        logger.info("beer.created", beer_id=beer.id)
        return beer

    @transaction.atomic
    def update_beer(self, id: int, dto: BeerDTO) -> Beer:
        """Replace every editable field of an existing beer.

        Raises:
            BeerNotFound: the beer does not exist.
            ConcurrentModification: ``dto.version`` (or the version just
                read) is no longer the stored one.
        """
        beer = self._repo.get_by_id(id)
        if beer is None:
            raise BeerNotFound(id)

        if dto.version is not None:
            beer.version = dto.version
        for field in ("beer_name", "beer_style", "upc", "price", "quantity_on_hand"):
            setattr(beer, field, getattr(dto, field))

        result = self._repo.save(beer)
        if result.conflict:
            raise ConcurrentModification("Beer", id, result.expected_version)
        logger.info("beer.updated", beer_id=id, version=beer.version)
        return result.entity

    @transaction.atomic
    def delete_beer(self, id: int) -> bool:
        """Delete a beer; ``False`` when it does not exist.

        Raises:
            BeerInUse: order lines still reference the beer.
        """
        if self._repo.get_by_id(id) is None:
            return False
        if self._repo.is_referenced(id):
            logger.warning("beer.delete_rejected", beer_id=id)
            raise BeerInUse(id)
        return self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_beer(self, id: int) -> Optional[Beer]:
        return self._repo.get_by_id(id)

    def list_beers(self) -> List[Beer]:
        return self._repo.list()
