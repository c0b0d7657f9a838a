"""Unit tests for constraint descriptions.

Covers:
- describe_constraints on BeerDto: joined text, empty text, unknown paths.
- Dotted paths into nested models, alias and attribute names.
- Template overrides from settings and custom resolvers.
- ConstrainedFields descriptors.
"""

from typing import Annotated, Optional

import pytest
from pydantic import BaseModel

from modules.beers.dtos import BeerDto
from modules.core.constraints import Constraint, NotBlank, NotNull, Size
from modules.restdocs.constraints import (
    ConstrainedFields,
    ConstraintDescriptionResolver,
    ConstraintDescriptions,
    TemplateConstraintDescriptionResolver,
    describe_constraints,
)
from modules.restdocs.exceptions import FieldNotFoundError

pytestmark = pytest.mark.unit


class Brewery(BaseModel):
    name: Annotated[Optional[str], NotBlank(), Size(min=0, max=255)] = None


class Shipment(BaseModel):
    brewery: Annotated[Optional[Brewery], NotNull()] = None
    crates: list[Brewery] = []


class TestDescribeBeerDto:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("id", "must be null"),
            ("createdDate", "must be null"),
            ("beerName", "must not be blank"),
            ("beerStyle", "must not be null"),
            (
                "upc",
                "must not be null. must be greater than 0. "
                "must be less than or equal to 9223372036854775807",
            ),
            ("price", "must not be null. must be greater than 0"),
            ("quantityOnHand", ""),
        ],
    )
    def test_descriptions(self, path, expected):
        assert describe_constraints(BeerDto, path) == expected

    def test_attribute_name_is_accepted(self):
        assert describe_constraints(BeerDto, "beer_name") == "must not be blank"

    def test_repeated_calls_are_identical(self):
        first = describe_constraints(BeerDto, "upc")
        assert all(describe_constraints(BeerDto, "upc") == first for _ in range(5))

    @pytest.mark.parametrize("path", ["abv", "", "beerName.length", "BeerName"])
    def test_unknown_path_raises(self, path):
        with pytest.raises(FieldNotFoundError) as exc_info:
            describe_constraints(BeerDto, path)
        assert exc_info.value.path == path
        assert exc_info.value.model is BeerDto


class TestNestedPaths:
    def test_descriptions_list(self):
        descriptions = ConstraintDescriptions(Shipment)
        assert descriptions.descriptions_for_property("brewery") == ["must not be null"]
        assert descriptions.descriptions_for_property("brewery.name") == [
            "must not be blank",
            "size must be between 0 and 255",
        ]

    def test_array_items(self):
        assert describe_constraints(Shipment, "crates[].name") == (
            "must not be blank. size must be between 0 and 255"
        )

    def test_unknown_nested_field(self):
        with pytest.raises(FieldNotFoundError):
            describe_constraints(Shipment, "brewery.city")


class TestResolvers:
    def test_settings_override(self, settings):
        settings.RESTDOCS = {
            **settings.RESTDOCS,
            "CONSTRAINT_DESCRIPTIONS": {"Size": "Length {min}..{max}"},
        }
        assert describe_constraints(Brewery, "name") == "must not be blank. Length 0..255"

    def test_explicit_templates(self):
        resolver = TemplateConstraintDescriptionResolver({"NotBlank": "Must not be blank"})
        assert describe_constraints(BeerDto, "beerName", resolver) == "Must not be blank"

    def test_custom_resolver(self):
        class ByName(ConstraintDescriptionResolver):
            def resolve_description(self, constraint: Constraint) -> str:
                return constraint.name

        assert describe_constraints(BeerDto, "price", ByName()) == "NotNull. Positive"


class TestConstrainedFields:
    def test_descriptor_carries_constraints(self):
        descriptor = ConstrainedFields(BeerDto).with_path("upc", "Beer UPC")

        assert descriptor.path == "upc"
        assert descriptor.description == "Beer UPC"
        assert descriptor.attributes["constraints"] == (
            "must not be null. must be greater than 0. "
            "must be less than or equal to 9223372036854775807"
        )

    def test_ignored_descriptor(self):
        descriptor = ConstrainedFields(BeerDto).with_path("id", ignored=True)
        assert descriptor.ignored
        assert descriptor.attributes["constraints"] == "must be null"

    def test_extra_attributes_are_kept(self):
        descriptor = ConstrainedFields(BeerDto).with_path(
            "quantityOnHand", "Stock", attributes={"unit": "bottles"}
        )
        assert descriptor.attributes == {"unit": "bottles", "constraints": ""}

    def test_unknown_path_raises(self):
        with pytest.raises(FieldNotFoundError):
            ConstrainedFields(BeerDto).with_path("abv")
