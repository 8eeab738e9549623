"""Unit tests for CustomerService and CustomerDTO."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.core.exceptions import ConcurrentModification
from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
)
from modules.customers.models import Customer
from modules.customers.repositories import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.orders.models import BeerOrder

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return CustomerService(repository=CustomerDjangoRepository())


class TestCustomerDTO:
    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            CustomerDTO(customer_name="  ")

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            CustomerDTO(customer_name="Hop Shop", email="not-an-email")

    def test_blank_email_becomes_none(self):
        assert CustomerDTO(customer_name="Hop Shop", email="").email is None

    def test_defaults(self):
        dto = CustomerDTO(customer_name="Hop Shop")
        assert dto.email is None
        assert dto.phone == ""
        assert dto.version is None


class TestCustomerService:
    def test_create_normalises_email(self, service):
        customer = service.create_customer(
            CustomerDTO(customer_name="Hop Shop", email="Hop.Shop@Example.com")
        )
        assert Customer.objects.get(id=customer.id).email == "hop.shop@example.com"

    def test_customers_without_email_do_not_collide(self, service):
        service.create_customer(CustomerDTO(customer_name="A"))
        service.create_customer(CustomerDTO(customer_name="B", email=""))
        assert Customer.objects.filter(email__isnull=True).count() == 2

    def test_duplicate_email_rejected(self, service, customer):
        with pytest.raises(CustomerAlreadyExists):
            service.create_customer(
                CustomerDTO(customer_name="Copy", email="TASTING.ROOM@example.com")
            )

    def test_get_by_email_is_case_insensitive(self, service, customer):
        found = service.get_customer_by_email("Tasting.Room@Example.com")
        assert found.id == customer.id

    def test_get_by_email_missing(self, service):
        assert service.get_customer_by_email("nobody@example.com") is None

    def test_get_missing_returns_none(self, service):
        assert service.get_customer(999) is None

    def test_update_keeps_own_email(self, service, customer):
        updated = service.update_customer(
            customer.id,
            CustomerDTO(customer_name="Tasting Room II", email=customer.email),
        )
        assert updated.customer_name == "Tasting Room II"
        assert updated.version == 1

    def test_update_to_taken_email_rejected(self, service, customer):
        other = Customer.objects.create(customer_name="Other", email="other@example.com")
        with pytest.raises(CustomerAlreadyExists):
            service.update_customer(
                other.id, CustomerDTO(customer_name="Other", email=customer.email)
            )

    def test_update_stale_version(self, service, customer):
        with pytest.raises(ConcurrentModification):
            service.update_customer(
                customer.id, CustomerDTO(customer_name="Late", version=3)
            )
        assert Customer.objects.get(id=customer.id).customer_name == "Tasting Room"

    def test_update_missing(self, service):
        with pytest.raises(CustomerNotFound):
            service.update_customer(999, CustomerDTO(customer_name="Ghost"))

    def test_delete(self, service, customer):
        assert service.delete_customer(customer.id) is True
        assert service.delete_customer(customer.id) is False

    def test_delete_with_orders_rejected(self, service, customer):
        BeerOrder.objects.create(customer=customer)
        with pytest.raises(CustomerHasOrders):
            service.delete_customer(customer.id)
        assert Customer.objects.filter(id=customer.id).exists()

    def test_list(self, service, customer):
        assert [c.id for c in service.list_customers()] == [customer.id]
