"""Unit tests for BeerDto.

Covers:
- camelCase JSON names and population by attribute name.
- JSON serialization of every field, including empty ones.
- Frozen immutability.
- Payload rules: required fields, column limits, lenient read-only fields.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.beers.dtos import BeerDto
from modules.beers.models import BeerStyle
from modules.core.constraints import validate_payload

pytestmark = pytest.mark.unit


class TestBeerDtoNames:
    def test_accepts_camel_case_payload(self):
        dto = BeerDto.model_validate(
            {
                "beerName": "Nice Ale",
                "beerStyle": "ALE",
                "upc": 123123123123,
                "price": "9.99",
                "quantityOnHand": 12,
            }
        )
        assert dto.beer_name == "Nice Ale"
        assert dto.beer_style == BeerStyle.ALE
        assert dto.price == Decimal("9.99")
        assert dto.quantity_on_hand == 12

    def test_accepts_attribute_names(self):
        dto = BeerDto(beer_name="Nice Ale", upc=1)
        assert dto.beer_name == "Nice Ale"

    def test_json_uses_camel_case_and_keeps_empty_fields(self):
        assert set(BeerDto().to_json()) == {
            "id",
            "version",
            "createdDate",
            "lastModifiedDate",
            "beerName",
            "beerStyle",
            "upc",
            "price",
            "quantityOnHand",
        }

    def test_json_values(self):
        beer_id = uuid.uuid4()
        data = BeerDto(
            id=beer_id,
            beer_style=BeerStyle.PALE_ALE,
            price=Decimal("9.99"),
        ).to_json()
        assert data["id"] == str(beer_id)
        assert data["beerStyle"] == "PALE_ALE"
        assert data["price"] == "9.99"


class TestBeerDtoValidation:
    def test_unknown_style_rejected(self):
        with pytest.raises(ValidationError):
            BeerDto.model_validate({"beerStyle": "CIDER"})

    def test_non_numeric_upc_rejected(self):
        with pytest.raises(ValidationError):
            BeerDto.model_validate({"upc": "abc"})

    def test_frozen(self):
        dto = BeerDto(beer_name="Nice Ale")
        with pytest.raises(ValidationError):
            dto.beer_name = "Other"


class TestBeerDtoPayloadRules:
    VALID = {"beerName": "Nice Ale", "beerStyle": "ALE", "upc": 1, "price": "9.99"}

    def test_valid_payload(self):
        assert validate_payload(BeerDto, self.VALID).upc == 1

    def test_missing_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(BeerDto, {"beerName": "Nice Ale"})
        assert [e["msg"] for e in exc_info.value.errors()] == ["must not be null"] * 3

    def test_upc_must_fit_64_bits(self):
        validate_payload(BeerDto, {**self.VALID, "upc": 2**63 - 1})
        with pytest.raises(ValidationError):
            validate_payload(BeerDto, {**self.VALID, "upc": 2**63})

    @pytest.mark.parametrize("price", ["9.999", "123456789.99"])
    def test_price_must_fit_column(self, price):
        with pytest.raises(ValidationError):
            validate_payload(BeerDto, {**self.VALID, "price": price})

    def test_beer_name_must_fit_column(self):
        with pytest.raises(ValidationError):
            validate_payload(BeerDto, {**self.VALID, "beerName": "x" * 256})

    def test_mistyped_read_only_fields_become_none(self):
        dto = validate_payload(BeerDto, {**self.VALID, "version": "x", "id": "not-a-uuid"})
        assert dto.version is None
        assert dto.id is None

    def test_entity_shaped_dto_may_be_empty(self):
        assert BeerDto().beer_style is None
