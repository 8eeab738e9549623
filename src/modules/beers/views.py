"""Beer API views.

Exposes the ``BeerService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.beers.dtos import BeerDTO
from modules.beers.exceptions import BeerInUse, BeerNotFound
from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.beers.serializers import BeerInputSerializer, BeerSerializer
from modules.beers.services import BeerService
from modules.core.exceptions import ConcurrentModification, validation_error_from_pydantic

NOT_FOUND = {"detail": "Beer not found."}


class BeerViewSet(GenericViewSet):
    """ViewSet for Beer CRUD operations.

    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    serializer_class = BeerSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = BeerService(repository=BeerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/beers/"""
        beers = self._service.list_beers()
        return Response(BeerSerializer(beers, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/beers/{pk}/"""
        beer = self._service.get_beer(int(pk))
        if beer is None:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(BeerSerializer(beer).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @staticmethod
    def _build_dto(request: Request) -> BeerDTO:
        serializer = BeerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            return BeerDTO(**serializer.validated_data)
        except PydanticValidationError as exc:
            raise validation_error_from_pydantic(exc) from exc

    def create(self, request: Request) -> Response:
        """POST /api/v1/beers/"""
        beer = self._service.create_beer(self._build_dto(request))
        return Response(BeerSerializer(beer).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/beers/{pk}/"""
        dto = self._build_dto(request)

        try:
            beer = self._service.update_beer(int(pk), dto)
        except BeerNotFound:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        except ConcurrentModification as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        return Response(BeerSerializer(beer).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/beers/{pk}/"""
        try:
            deleted = self._service.delete_beer(int(pk))
        except BeerInUse as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

        if not deleted:
            return Response(NOT_FOUND, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
