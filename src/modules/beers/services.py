"""Beer service layer (Use Cases).

Orchestrates the Beer endpoints, delegating persistence to the injected
``IBeerRepository`` and shape conversion to the injected ``IBeerMapper``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

import structlog
import uuid6
from django.db import transaction

from modules.beers.exceptions import BeerNotFound

if TYPE_CHECKING:
    from modules.beers.dtos import BeerDto
    from modules.beers.mappers import IBeerMapper
    from modules.beers.repositories.interfaces import IBeerRepository

logger = structlog.get_logger(__name__)

READ_ONLY_FIELDS = ("id", "version", "created_date", "last_modified_date")


class BeerService:
    """Application service for Beer use-cases.

    Receives its collaborators via constructor injection (DIP).
    """

    def __init__(self, repository: IBeerRepository, mapper: IBeerMapper) -> None:
        self._repo = repository
        self._mapper = mapper

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_beer(self, id: UUID) -> BeerDto:
        """Retrieve a single beer by ID.

        Raises:
            BeerNotFound: if the beer does not exist.
        """
        beer = self._repo.get_by_id(id)
        if beer is None:
            raise BeerNotFound(f"Beer {id} not found.")
        logger.info("beer.retrieved", beer_id=str(id))
        return self._mapper.to_dto(beer)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save_new_beer(self, dto: BeerDto) -> BeerDto:
        """Create a beer from a client payload.

        ``id``, ``version`` and both timestamps are server-assigned: whatever
        the client sent for them is discarded before saving.
        """
        dto = dto.model_copy(update=dict.fromkeys(READ_ONLY_FIELDS))
        beer = self._mapper.to_domain(dto)
        beer.id = uuid6.uuid7()

        beer = self._repo.save(beer)
        logger.info("beer.created", beer_id=str(beer.id), beer_name=beer.beer_name)
        return self._mapper.to_dto(beer)

    @transaction.atomic
    def update_beer(self, id: UUID, dto: BeerDto) -> None:
        """Copy the client-editable fields of ``dto`` onto an existing beer.

        A missing beer is not an error: the update is skipped and logged.
        """
        log = logger.bind(beer_id=str(id))

        beer = self._repo.get_by_id(id)
        if beer is None:
            log.warning("beer.update_skipped_missing")
            return

        beer.beer_name = dto.beer_name
        beer.beer_style = dto.beer_style
        beer.price = dto.price
        beer.upc = dto.upc

        self._repo.save(beer)
        log.info("beer.updated")
