"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import ConcurrentModification, validation_error_from_pydantic
from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasOrders,
    CustomerNotFound,
)
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerInputSerializer, CustomerSerializer
from modules.customers.services import CustomerService

NOT_FOUND = {"detail": "Customer not found."}


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer CRUD operations plus look-up by email."""

    serializer_class = CustomerSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        customer = self._service.get_customer(int(pk))
        if customer is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    @action(detail=False, methods=["get"], url_path="by-email")
    def by_email(self, request: Request) -> Response:
        """GET /api/v1/customers/by-email/?email=..."""
        email = request.query_params.get("email", "").strip()
        if not email:
            return Response(
                {"detail": "Query parameter 'email' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        customer = self._service.get_customer_by_email(email)
        if customer is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(customer).data)

    @staticmethod
    def _build_dto(request: Request) -> CustomerDTO:
        serializer = CustomerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            return CustomerDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        dto = self._build_dto(request)

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/"""
        dto = self._build_dto(request)

        try:
            customer = self._service.update_customer(int(pk), dto)
        except CustomerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except (CustomerAlreadyExists, ConcurrentModification) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(CustomerSerializer(customer).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            deleted = self._service.delete_customer(int(pk))
        except CustomerHasOrders as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        if not deleted:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
