"""Beer DTOs for the API layer.

``BeerDto`` is the externally-facing shape of a ``Beer``: JSON field names are
camelCase and the two timestamps travel as ISO-8601 text produced by
``DateMapper``.  Field constraints are declared with the markers from
``modules.core.constraints``; pydantic enforces them on inbound payloads
(``validate_payload``) and the generated API documentation describes them.

Column limits of the ``beers`` table are applied as plain pydantic field
constraints on the inner types so an oversized value is a validation error
rather than a database error.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from modules.beers.models import BeerStyle
from modules.core.constraints import Max, NotBlank, NotNull, Null, Positive

BIGINT_MAX = 2**63 - 1
INT_MIN, INT_MAX = -(2**31), 2**31 - 1

BeerName = Annotated[str, Field(max_length=255)]
Price = Annotated[Decimal, Field(max_digits=10, decimal_places=2)]
StockCount = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class BeerDto(BaseModel):
    """Immutable transfer object for the Beer resource.

    ``id``, ``version``, ``created_date`` and ``last_modified_date`` are
    assigned by the server and ignored when sent by a client, even when the
    value has the wrong type.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )

    id: Annotated[Optional[UUID], Null()] = None
    version: Annotated[Optional[int], Null()] = None
    created_date: Annotated[Optional[str], Null()] = None
    last_modified_date: Annotated[Optional[str], Null()] = None
    beer_name: Annotated[Optional[BeerName], NotBlank()] = None
    beer_style: Annotated[Optional[BeerStyle], NotNull()] = None
    upc: Annotated[Optional[int], NotNull(), Positive(), Max(BIGINT_MAX)] = None
    price: Annotated[Optional[Price], NotNull(), Positive()] = None
    quantity_on_hand: Optional[StockCount] = None

    def to_json(self) -> dict:
        """Serialize with the public (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)
