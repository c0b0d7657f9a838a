"""Unit tests for BeerDjangoRepository and the Beer model.

Covers:
- get_by_id: existing, missing and malformed IDs.
- save: insert then update, version counter and timestamps.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest

from modules.beers.models import Beer, BeerStyle
from modules.beers.repositories.django_repository import BeerDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return BeerDjangoRepository()


def _make_beer(**overrides) -> Beer:
    defaults = {
        "beer_name": "Mango Bobs",
        "beer_style": BeerStyle.IPA,
        "upc": 337010000001,
        "price": Decimal("12.95"),
        "quantity_on_hand": 144,
    }
    defaults.update(overrides)
    return Beer(**defaults)


class TestGetById:
    def test_existing(self, repo):
        beer = repo.save(_make_beer())
        found = repo.get_by_id(beer.id)
        assert found == beer
        assert found.beer_name == "Mango Bobs"

    def test_accepts_string_id(self, repo):
        beer = repo.save(_make_beer())
        assert repo.get_by_id(str(beer.id)) == beer

    def test_missing_returns_none(self, repo):
        assert repo.get_by_id(uuid.uuid4()) is None

    def test_malformed_id_returns_none(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


class TestSave:
    def test_insert_sets_version_and_timestamps(self, repo):
        beer = repo.save(_make_beer())

        assert beer.version == 0
        assert beer.created_date is not None
        assert beer.last_modified_date is not None

    def test_update_bumps_version_and_modified_date(self, repo):
        beer = repo.save(_make_beer())
        created, modified = beer.created_date, beer.last_modified_date

        beer.beer_name = "Mango Bobs Reserve"
        repo.save(beer)
        beer.refresh_from_db()

        assert beer.version == 1
        assert beer.beer_name == "Mango Bobs Reserve"
        assert beer.created_date == created
        assert beer.last_modified_date >= modified

    def test_update_fields_include_bookkeeping(self):
        beer = _make_beer()
        beer.save()

        beer.quantity_on_hand = 1
        beer.save(update_fields=["quantity_on_hand"])
        beer.refresh_from_db()

        assert beer.quantity_on_hand == 1
        assert beer.version == 1
