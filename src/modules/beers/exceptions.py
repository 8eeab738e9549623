"""Beer domain exceptions.

Raised by the Service Layer; the views translate them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class BeerNotFound(NotFound):
    """The referenced beer does not exist."""

    entity_name = "Beer"


class BeerInUse(Exception):
    """The beer is referenced by order lines and cannot be deleted."""

    def __init__(self, beer_id: int) -> None:
        self.beer_id = beer_id
        super().__init__(f"Beer {beer_id} is referenced by existing orders.")
