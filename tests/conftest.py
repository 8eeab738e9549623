from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.beers.models import Beer
from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer():
    return Customer.objects.create(
        customer_name="Tasting Room",
        email="tasting.room@example.com",
        phone="555-0100",
    )


@pytest.fixture()
def beer():
    return Beer.objects.create(
        beer_name="Mango Bobs",
        beer_style="ALE",
        upc="0631234200036",
        price=Decimal("12.95"),
        quantity_on_hand=120,
    )


@pytest.fixture()
def other_beer():
    return Beer.objects.create(
        beer_name="Galaxy Cat",
        beer_style="PALE_ALE",
        upc="0631234300019",
        price=Decimal("11.50"),
        quantity_on_hand=80,
    )
