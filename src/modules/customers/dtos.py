"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class CustomerDTO(BaseModel):
    """Full replacement payload for a customer (create and ``PUT``).

    Validates:
    - ``customer_name`` is not blank.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``) when given.
    """

    model_config = ConfigDict(frozen=True)

    customer_name: str
    email: Optional[EmailStr] = None
    phone: str = ""
    version: Optional[int] = None

    @field_validator("customer_name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Customer name is required.")
        return v.strip()

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str) and not v.strip():
            return None
        return v
