from unittest.mock import patch

import pytest

from rest_framework.test import APIClient

from modules.restdocs.client import RestDocsClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def snippets_dir(settings, tmp_path):
    """Redirect generated documentation snippets into a temporary directory."""
    settings.RESTDOCS = {**settings.RESTDOCS, "OUTPUT_DIR": str(tmp_path)}
    return tmp_path


@pytest.fixture()
def restdocs_client(snippets_dir):
    """Client whose calls can be passed to ``document()``."""
    return RestDocsClient()


@pytest.fixture()
def beer_repository():
    """Mock repository injected into every ``BeerViewSet`` built during the test.

    ``save`` returns the beer it was given; ``get_by_id`` finds nothing unless
    the test says otherwise.
    """
    with patch("modules.beers.views.BeerDjangoRepository") as repository_class:
        repository = repository_class.return_value
        repository.get_by_id.return_value = None
        repository.save.side_effect = lambda beer: beer
        yield repository
