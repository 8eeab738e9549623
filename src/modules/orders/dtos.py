"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``) to prevent accidental mutation
inside the service layer.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateBeerOrderLineDTO(BaseModel):
    """A single line in an order creation request.

    Validates:
    - ``order_quantity`` must be >= 1.
    """

    model_config = ConfigDict(frozen=True)

    beer_id: int
    order_quantity: int = Field(..., ge=1)


class CreateBeerOrderDTO(BaseModel):
    """Payload for creating a new order.

    Validates:
    - ``beer_order_lines`` must not be empty.
    - ``order_status_callback_url`` is optional and stored as given.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: int
    beer_order_lines: List[CreateBeerOrderLineDTO]
    order_status_callback_url: Optional[str] = None

    @field_validator("beer_order_lines")
    @classmethod
    def lines_must_not_be_empty(
        cls, v: List[CreateBeerOrderLineDTO]
    ) -> List[CreateBeerOrderLineDTO]:
        if not v:
            raise ValueError("Order must have at least one line.")
        return v
