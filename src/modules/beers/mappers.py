"""Conversion between the ``Beer`` entity and its ``BeerDto`` transfer shape.

Both mappers are stateless: every call allocates a new object and shares
nothing with other calls.  Mapping ``None`` returns ``None``; it never raises.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone as dt_timezone
from typing import Optional

from django.utils import timezone
from django.utils.dateparse import parse_datetime

from modules.beers.dtos import BeerDto
from modules.beers.exceptions import ConversionError
from modules.beers.models import Beer


class DateMapper:
    """Converts entity timestamps to ISO-8601 text and back.

    Text is always produced in UTC with full microsecond precision, so
    ``to_timestamp(to_textual(ts)) == ts`` for every aware or naive (UTC)
    timestamp.
    """

    def to_textual(self, timestamp: Optional[datetime]) -> Optional[str]:
        if timestamp is None:
            return None
        if not isinstance(timestamp, datetime):
            raise ConversionError(f"Cannot convert {timestamp!r} to a date string.")
        if timezone.is_naive(timestamp):
            timestamp = timezone.make_aware(timestamp, dt_timezone.utc)
        return timestamp.astimezone(dt_timezone.utc).isoformat()

    def to_timestamp(self, text: Optional[str]) -> Optional[datetime]:
        if text is None:
            return None
        try:
            parsed = parse_datetime(text)
        except (TypeError, ValueError) as exc:
            raise ConversionError(f"Invalid date string {text!r}.") from exc
        if parsed is None:
            raise ConversionError(f"Invalid date string {text!r}.")
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed, dt_timezone.utc)
        return parsed


class IBeerMapper(ABC):
    """Mapper contract between the persistence and API shapes of a beer."""

    @abstractmethod
    def to_dto(self, beer: Optional[Beer]) -> Optional[BeerDto]:
        """Convert an entity into its transfer shape."""

    @abstractmethod
    def to_domain(self, dto: Optional[BeerDto]) -> Optional[Beer]:
        """Convert a transfer object into an (unsaved) entity."""


class BeerMapper(IBeerMapper):
    """Field-by-field mapper; dates go through the injected ``DateMapper``.

    Every ``BeerDto`` field has a ``Beer`` counterpart of the same name, so
    no field is dropped in either direction.
    """

    def __init__(self, date_mapper: Optional[DateMapper] = None) -> None:
        self._dates = date_mapper or DateMapper()

    def to_dto(self, beer: Optional[Beer]) -> Optional[BeerDto]:
        if beer is None:
            return None
        return BeerDto(
            id=beer.id,
            version=beer.version,
            created_date=self._dates.to_textual(beer.created_date),
            last_modified_date=self._dates.to_textual(beer.last_modified_date),
            beer_name=beer.beer_name,
            beer_style=beer.beer_style,
            upc=beer.upc,
            price=beer.price,
            quantity_on_hand=beer.quantity_on_hand,
        )

    def to_domain(self, dto: Optional[BeerDto]) -> Optional[Beer]:
        if dto is None:
            return None
        return Beer(
            id=dto.id,
            version=dto.version,
            created_date=self._dates.to_timestamp(dto.created_date),
            last_modified_date=self._dates.to_timestamp(dto.last_modified_date),
            beer_name=dto.beer_name,
            beer_style=dto.beer_style,
            upc=dto.upc,
            price=dto.price,
            quantity_on_hand=dto.quantity_on_hand,
        )
