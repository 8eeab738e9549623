"""Unit tests for BeerService (plain CRUD) with the ORM repository."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.beers.dtos import BeerDTO
from modules.beers.exceptions import BeerInUse, BeerNotFound
from modules.beers.models import Beer
from modules.beers.repositories import BeerDjangoRepository
from modules.beers.services import BeerService
from modules.core.exceptions import ConcurrentModification
from modules.orders.models import BeerOrder, BeerOrderLine

pytestmark = pytest.mark.unit


def _dto(**overrides) -> BeerDTO:
    data = {
        "beer_name": "Very GGGreenn",
        "beer_style": "IPA",
        "upc": "5677465691934",
        "price": Decimal("12.95"),
        "quantity_on_hand": 30,
    }
    data.update(overrides)
    return BeerDTO(**data)


@pytest.fixture()
def service():
    return BeerService(repository=BeerDjangoRepository())


class TestBeerDTO:
    @pytest.mark.parametrize("field", ["beer_name", "beer_style", "upc"])
    def test_blank_text_rejected(self, field):
        with pytest.raises(ValidationError):
            _dto(**{field: "   "})

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
    def test_non_positive_price_rejected(self, price):
        with pytest.raises(ValidationError):
            _dto(price=price)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            _dto(quantity_on_hand=-1)

    def test_text_is_stripped(self):
        assert _dto(beer_name="  Blessed ").beer_name == "Blessed"


class TestBeerService:
    def test_create_and_get(self, service):
        beer = service.create_beer(_dto())

        assert beer.id is not None
        assert beer.version == 0
        assert service.get_beer(beer.id).beer_name == "Very GGGreenn"

    def test_get_missing_returns_none(self, service):
        assert service.get_beer(999) is None

    def test_list_in_insertion_order(self, service):
        first = service.create_beer(_dto(beer_name="First"))
        second = service.create_beer(_dto(beer_name="Second"))
        assert [b.id for b in service.list_beers()] == [first.id, second.id]

    def test_update_replaces_fields_and_bumps_version(self, service, beer):
        updated = service.update_beer(beer.id, _dto(price=Decimal("9.99")))

        assert updated.version == 1
        stored = Beer.objects.get(id=beer.id)
        assert stored.beer_name == "Very GGGreenn"
        assert stored.price == Decimal("9.99")
        assert stored.version == 1

    def test_update_with_matching_version(self, service, beer):
        updated = service.update_beer(beer.id, _dto(version=0))
        assert updated.version == 1

    def test_update_with_stale_version_is_rejected(self, service, beer):
        service.update_beer(beer.id, _dto(beer_name="First writer"))

        with pytest.raises(ConcurrentModification) as exc_info:
            service.update_beer(beer.id, _dto(beer_name="Stale writer", version=0))

        assert exc_info.value.expected_version == 0
        assert Beer.objects.get(id=beer.id).beer_name == "First writer"

    def test_update_missing(self, service):
        with pytest.raises(BeerNotFound):
            service.update_beer(999, _dto())

    def test_delete(self, service, beer):
        assert service.delete_beer(beer.id) is True
        assert not Beer.objects.filter(id=beer.id).exists()

    def test_delete_missing(self, service):
        assert service.delete_beer(999) is False

    def test_delete_referenced_beer_rejected(self, service, beer, customer):
        order = BeerOrder.objects.create(customer=customer)
        BeerOrderLine.objects.create(beer_order=order, beer=beer, order_quantity=1)

        with pytest.raises(BeerInUse):
            service.delete_beer(beer.id)
        assert Beer.objects.filter(id=beer.id).exists()
