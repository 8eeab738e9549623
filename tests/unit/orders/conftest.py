import pytest

from modules.beers.repositories import BeerDjangoRepository
from modules.customers.repositories import CustomerDjangoRepository
from modules.orders.dtos import CreateBeerOrderDTO, CreateBeerOrderLineDTO
from modules.orders.repositories import OrderDjangoRepository
from modules.orders.services import OrderService


@pytest.fixture()
def order_service():
    return OrderService(
        order_repository=OrderDjangoRepository(),
        customer_repository=CustomerDjangoRepository(),
        beer_repository=BeerDjangoRepository(),
    )


@pytest.fixture()
def make_dto():
    def _make(customer_id, *lines, callback_url=None):
        return CreateBeerOrderDTO(
            customer_id=customer_id,
            beer_order_lines=[
                CreateBeerOrderLineDTO(beer_id=beer_id, order_quantity=quantity)
                for beer_id, quantity in lines
            ],
            order_status_callback_url=callback_url,
        )

    return _make
