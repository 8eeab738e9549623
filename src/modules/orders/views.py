"""Order API views.

Exposes the ``OrderService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.beers.exceptions import BeerNotFound
from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.core.exceptions import ConcurrentModification
from modules.customers.exceptions import CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateBeerOrderDTO, CreateBeerOrderLineDTO
from modules.orders.exceptions import InvalidOrderState, OrderNotFound
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import (
    BeerOrderSerializer,
    CreateBeerOrderSerializer,
    InvalidOrderStateSerializer,
)
from modules.orders.services import OrderService


class BeerOrderViewSet(GenericViewSet):
    """ViewSet for BeerOrder operations.

    Uses ``OrderService`` with injected repositories (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    serializer_class = BeerOrderSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            beer_repository=BeerDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateBeerOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateBeerOrderDTO(
            customer_id=data["customer_id"],
            beer_order_lines=[
                CreateBeerOrderLineDTO(
                    beer_id=line["beer_id"],
                    order_quantity=line["order_quantity"],
                )
                for line in data["beer_order_lines"]
            ],
            order_status_callback_url=data.get("order_status_callback_url"),
        )

        try:
            order = self._service.create_order(dto)
        except (CustomerNotFound, BeerNotFound) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

        return Response(BeerOrderSerializer(order).data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/"""
        orders = self._service.list_orders()
        return Response(BeerOrderSerializer(orders, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(int(pk))
        except OrderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(BeerOrderSerializer(order).data)

    @action(
        detail=False,
        methods=["get"],
        url_path=r"customer/(?P<customer_id>\d+)",
        url_name="by-customer",
    )
    def by_customer(self, request: Request, customer_id: str | None = None) -> Response:
        """GET /api/v1/orders/customer/{customer_id}/"""
        try:
            orders = self._service.list_orders_for_customer(int(customer_id))
        except CustomerNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(BeerOrderSerializer(orders, many=True).data)

    # ------------------------------------------------------------------
    # Cancel (dedicated action)
    # ------------------------------------------------------------------

    @action(detail=True, methods=["put"])
    def cancel(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/cancel/"""
        try:
            self._service.cancel_order(int(pk))
        except OrderNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidOrderState as exc:
            body = InvalidOrderStateSerializer(
                {
                    "detail": str(exc),
                    "current_status": exc.current_status,
                    "target_status": exc.target_status,
                }
            )
            return Response(body.data, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
        except ConcurrentModification as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(status=status.HTTP_204_NO_CONTENT)
