"""Django ORM implementation of the Beer repository.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into an API response.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.beers.models import Beer
from modules.beers.repositories.interfaces import IBeerRepository

logger = structlog.get_logger(__name__)


class BeerDjangoRepository(IBeerRepository):
    """Concrete Beer repository backed by Django ORM."""

    def get_by_id(self, id: UUID | str) -> Optional[Beer]:
        """Retrieve a beer by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Beer.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Beer) -> Beer:
        """Persist (create or update) a beer."""
        entity.save()
        logger.info(
            "beer.saved",
            beer_id=str(entity.id),
            version=entity.version,
        )
        return entity
