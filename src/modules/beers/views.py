"""Beer API views.

Exposes the ``BeerService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes. The view never swallows generic exceptions.
"""

from __future__ import annotations

from uuid import UUID

from drf_spectacular.utils import OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import ViewSet

from modules.beers.dtos import BeerDto
from modules.beers.exceptions import BeerNotFound
from modules.beers.mappers import BeerMapper
from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.beers.services import BeerService
from modules.core.constraints import validate_payload


class BeerViewSet(ViewSet):
    """ViewSet for the Beer resource (retrieve, create, update).

    All ORM access goes through the service/repository layer and every
    payload goes through ``BeerMapper``.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = BeerService(
            repository=BeerDjangoRepository(),
            mapper=BeerMapper(),
        )

    # ------------------------------------------------------------------
    # Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses={200: BeerDto, 404: OpenApiResponse(description="Unknown beer")})
    def retrieve(self, request: Request, beer_id: UUID) -> Response:
        """GET /api/v1/beer/{beer_id}"""
        try:
            dto = self._service.get_beer(beer_id)
        except BeerNotFound:
            return Response(
                {"detail": "Beer not found."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(dto.to_json())

    # ------------------------------------------------------------------
    # Create / Update
    # ------------------------------------------------------------------

    @extend_schema(request=BeerDto, responses={201: None, 400: None})
    def create(self, request: Request) -> Response:
        """POST /api/v1/beer/"""
        dto, error = self._read_payload(request)
        if error is not None:
            return error

        saved = self._service.save_new_beer(dto)
        location = reverse("beer-detail", kwargs={"beer_id": saved.id}, request=request)
        return Response(status=status.HTTP_201_CREATED, headers={"Location": location})

    @extend_schema(request=BeerDto, responses={204: None, 400: None})
    def update(self, request: Request, beer_id: UUID) -> Response:
        """PUT /api/v1/beer/{beer_id}"""
        dto, error = self._read_payload(request)
        if error is not None:
            return error

        self._service.update_beer(beer_id, dto)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _read_payload(request: Request) -> tuple[BeerDto | None, Response | None]:
        """Parse and check a request body, returning a 400 response on failure."""
        try:
            dto = validate_payload(BeerDto, request.data)
        except PydanticValidationError as exc:
            return None, Response(
                {
                    "detail": "Validation failed.",
                    "errors": [
                        {
                            "field": _json_path(error["loc"]),
                            "message": error["msg"],
                        }
                        for error in exc.errors()
                    ],
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        return dto, None


def _json_path(loc: tuple) -> str:
    """Dotted error location using the public (camelCase) field names."""
    parts = [str(part) for part in loc]
    if parts and parts[0] in BeerDto.model_fields:
        parts[0] = BeerDto.model_fields[parts[0]].alias or parts[0]
    return ".".join(parts)
