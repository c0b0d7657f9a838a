"""Integration tests for the ambient HTTP stack.

Covers:
- X-Request-ID propagation by CorrelationIdMiddleware.
- OpenAPI schema served by drf-spectacular.
"""

import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get(f"/api/v1/beer/{uuid.uuid4()}")
        assert response["X-Request-ID"] == cid

    def test_generates_uuid_when_no_request_id(self, api_client):
        response = api_client.get(f"/api/v1/beer/{uuid.uuid4()}")
        request_id = response["X-Request-ID"]
        assert str(uuid.UUID(request_id, version=4)) == request_id

    def test_correlation_id_in_logs(self, api_client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            api_client.get(f"/api/v1/beer/{uuid.uuid4()}", HTTP_X_REQUEST_ID=custom_id)
        assert any(custom_id in record.getMessage() for record in caplog.records), (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )


class TestOpenApiSchema:
    def test_schema_lists_beer_paths(self, api_client):
        response = api_client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")
        assert response.status_code == 200
        body = response.content.decode()
        assert "/api/v1/beer/" in body
        assert "/api/v1/beer/{beer_id}" in body
