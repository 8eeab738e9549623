"""Beer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class BeerDTO(BaseModel):
    """Full replacement payload for a beer (create and ``PUT``).

    ``version`` is only meaningful on updates: when supplied it must match
    the stored version.
    """

    model_config = ConfigDict(frozen=True)

    beer_name: str
    beer_style: str
    upc: str
    price: Decimal
    quantity_on_hand: int
    version: Optional[int] = None

    @field_validator("beer_name", "beer_style", "upc")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Value must not be blank.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be positive.")
        return v

    @field_validator("quantity_on_hand")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity on hand must be zero or positive.")
        return v
