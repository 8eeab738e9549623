"""Shared domain exception bases and the DRF error formatter.

Domain exceptions are raised by the Service Layer and translated into
HTTP responses by the views.  Errors raised by DRF itself (parsing,
field validation, unknown routes) go through ``standard_exception_handler``
so every error body has the same shape::

    {"type": "validation_error",
     "errors": [{"code": "required", "detail": "...", "attr": "beer_name"}]}
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class NotFound(Exception):
    """A referenced identifier does not resolve to a stored record."""

    entity_name = "Entity"

    def __init__(self, entity_id: Any) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} not found with ID: {entity_id}")


class ConcurrentModification(Exception):
    """A write was attempted against a stale ``version``."""

    def __init__(self, entity_name: str, entity_id: Any, expected_version: int) -> None:
        self.entity_name = entity_name
        self.entity_id = entity_id
        self.expected_version = expected_version
        super().__init__(
            f"{entity_name} {entity_id} was modified concurrently "
            f"(expected version {expected_version})."
        )


def validation_error_from_pydantic(exc: PydanticValidationError) -> exceptions.ValidationError:
    """Convert DTO validation failures into a DRF ``ValidationError``.

    Serializer fields are looser than some DTO rules (``EmailStr`` refuses
    reserved domains such as ``.test`` and ``localhost``), so a payload can
    pass the serializer and still fail when the DTO is built.
    """
    detail: Dict[str, List[exceptions.ErrorDetail]] = {}
    for error in exc.errors():
        attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
        detail.setdefault(attr, []).append(
            exceptions.ErrorDetail(error["msg"], code=error["type"])
        )
    return exceptions.ValidationError(detail)


# ---------------------------------------------------------------------------
# DRF exception handler
# ---------------------------------------------------------------------------


def _error_type(exc: exceptions.APIException) -> str:
    if isinstance(exc, exceptions.ValidationError):
        return "validation_error"
    if exc.status_code >= 500:
        return "server_error"
    return "client_error"


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Flatten DRF's nested ``detail`` into a list of per-field errors."""
    if isinstance(detail, dict):
        errors: List[Dict[str, Any]] = []
        for key, value in detail.items():
            if key == "non_field_errors":
                name = attr
            else:
                name = key if attr is None else f"{attr}.{key}"
            errors.extend(_flatten(value, name))
        return errors
    if isinstance(detail, list):
        errors = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                name = str(index) if attr is None else f"{attr}.{index}"
                errors.extend(_flatten(value, name))
            else:
                errors.extend(_flatten(value, attr))
        return errors
    return [
        {
            "code": getattr(detail, "code", "error"),
            "detail": str(detail),
            "attr": attr,
        }
    ]


def standard_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Render DRF exceptions in the standard ``type`` / ``errors`` format.

    Returns ``None`` for anything DRF does not recognise so Django's own
    500 handling takes over.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.APIException):
        error_type = _error_type(exc)
        errors = _flatten(exc.detail)
    else:
        # Http404 / PermissionDenied converted by DRF
        error_type = "client_error"
        errors = _flatten(response.data.get("detail", ""))

    view = context.get("view")
    logger.info(
        "api.error_response",
        view=type(view).__name__ if view is not None else None,
        status_code=response.status_code,
        error_type=error_type,
    )
    response.data = {"type": error_type, "errors": errors}
    return response
