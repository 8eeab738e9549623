"""Unit tests for the DRF error flattening helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions

from modules.beers.exceptions import BeerNotFound
from modules.core.exceptions import (
    ConcurrentModification,
    _flatten,
    standard_exception_handler,
    validation_error_from_pydantic,
)
from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import CustomerNotFound
from modules.orders.exceptions import OrderNotFound

pytestmark = pytest.mark.unit


class TestNotFoundMessages:
    @pytest.mark.parametrize(
        "exc_class, name",
        [(BeerNotFound, "Beer"), (CustomerNotFound, "Customer"), (OrderNotFound, "Order")],
    )
    def test_message_names_entity_and_id(self, exc_class, name):
        exc = exc_class(999)
        assert str(exc) == f"{name} not found with ID: 999"
        assert exc.entity_id == 999

    def test_concurrent_modification_carries_expected_version(self):
        exc = ConcurrentModification("Order", 3, 2)
        assert exc.entity_id == 3
        assert exc.expected_version == 2
        assert "expected version 2" in str(exc)


class TestFlatten:
    def test_field_errors_get_attr(self):
        detail = exceptions.ValidationError({"beer_name": ["This field is required."]}).detail
        assert _flatten(detail) == [
            {"code": "invalid", "detail": "This field is required.", "attr": "beer_name"}
        ]

    def test_nested_list_errors_get_dotted_attr(self):
        detail = exceptions.ValidationError(
            {"beer_order_lines": [{}, {"order_quantity": ["Too small."]}]}
        ).detail
        errors = _flatten(detail)
        assert errors == [
            {"code": "invalid", "detail": "Too small.", "attr": "beer_order_lines.1.order_quantity"}
        ]

    def test_non_field_errors_have_no_attr(self):
        detail = exceptions.ValidationError({"non_field_errors": ["Bad."]}).detail
        assert _flatten(detail)[0]["attr"] is None


class TestStandardExceptionHandler:
    def test_validation_error_is_reformatted(self):
        exc = exceptions.ValidationError({"upc": ["This field may not be blank."]})
        response = standard_exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert response.data["errors"][0]["attr"] == "upc"

    def test_parse_error_is_client_error(self):
        response = standard_exception_handler(exceptions.ParseError(), {})
        assert response.status_code == 400
        assert response.data["type"] == "client_error"
        assert response.data["errors"][0]["code"] == "parse_error"

    def test_unknown_exception_returns_none(self):
        assert standard_exception_handler(RuntimeError("boom"), {}) is None


class TestValidationErrorFromPydantic:
    def _dto_error(self, **payload) -> PydanticValidationError:
        with pytest.raises(PydanticValidationError) as excinfo:
            CustomerDTO(**payload)
        return excinfo.value

    def test_field_error_keeps_attr(self):
        exc = validation_error_from_pydantic(
            self._dto_error(customer_name="Bob", email="bob@localhost")
        )
        assert isinstance(exc, exceptions.ValidationError)
        assert list(exc.detail) == ["email"]

    def test_rendered_as_validation_error(self):
        exc = validation_error_from_pydantic(
            self._dto_error(customer_name="Bob", email="bob@brewery.test")
        )
        response = standard_exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data["type"] == "validation_error"
        assert response.data["errors"][0]["attr"] == "email"
        assert response.data["errors"][0]["code"] == "value_error"

    def test_every_failing_field_is_reported(self):
        exc = validation_error_from_pydantic(
            self._dto_error(customer_name="  ", email="bob@localhost")
        )
        assert set(exc.detail) == {"customer_name", "email"}
