"""
Tests for the Beacon API endpoints.

Exercises the FastAPI routes end to end: query building, request
normalization errors, security headers and rate limiting.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from app.shared.security.headers import SECURE_HEADERS
from app.shared.security.rate_limiting import limiter

QUERY_URL = f"{settings.api_prefix}/beacon/query"


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get(f"{settings.api_prefix}/health")
        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "service": settings.project_name,
            "version": settings.version,
        }


class TestBuildQueryEndpoint:
    """Tests for GET /api/v1/beacon/query."""

    def test_normalizes_parameters(self, client: TestClient) -> None:
        response = client.get(
            QUERY_URL,
            params={
                "referenceName": "chr17",
                "start": 41196311,
                "referenceBases": "g",
                "alternateBases": "del",
                "assemblyId": "GRCh38",
                "datasetIds": ["ds1", "ds2"],
                "includeDatasetResponses": "true",
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "referenceName": "17",
            "start": 41196311,
            "referenceBases": "G",
            "alternateBases": "D",
            "assemblyId": "HG38",
            "datasetIds": ["ds1", "ds2"],
            "includeDatasetResponses": True,
        }

    def test_unknown_values_are_null(self, client: TestClient) -> None:
        response = client.get(
            QUERY_URL, params={"referenceName": "chrZ", "referenceBases": "xyz", "assemblyId": "hg19"}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["referenceName"] is None
        assert body["referenceBases"] is None
        assert body["datasetIds"] == []

    @pytest.mark.parametrize(
        "params",
        [
            {"referenceName": "1", "assemblyId": "bogus"},
            {"referenceName": "1", "referenceBases": "A"},
        ],
        ids=["unknown-assembly", "missing-assembly"],
    )
    def test_unrecognized_assembly_returns_500(self, params: dict) -> None:
        """Building a query without a known assembly fails with a generic 500."""
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get(QUERY_URL, params=params)

        assert response.status_code == 500
        assert response.json() == {"errorCode": 500, "message": "Internal server error"}
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_non_integer_start_rejected(self, client: TestClient) -> None:
        response = client.get(QUERY_URL, params={"start": "abc", "assemblyId": "hg19"})
        assert response.status_code == 422


class TestNormalizeRequestEndpoint:
    """Tests for POST /api/v1/beacon/query."""

    def test_rejected_request_echoed_with_400(self, client: TestClient) -> None:
        payload = {
            "referenceName": "chr1",
            "start": 100,
            "referenceBases": "A",
            "alternateBases": "G",
            "assemblyId": "hg19",
            "datasetIds": ["ds1"],
            "includeDatasetResponses": True,
        }
        response = client.post(QUERY_URL, json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "alleleRequest": payload,
            "exists": None,
            "error": {"errorCode": 400, "message": "Invalid reference passed in request"},
        }

    def test_missing_reference_rejected(self, client: TestClient) -> None:
        response = client.post(QUERY_URL, json={"start": 1})
        assert response.status_code == 400
        body = response.json()
        assert body["error"]["message"] == "Invalid reference passed in request"
        assert body["alleleRequest"]["start"] == 1
        assert body["alleleRequest"]["datasetIds"] == []

    def test_malformed_body_rejected(self, client: TestClient) -> None:
        response = client.post(QUERY_URL, json={"start": "not-a-number"})
        assert response.status_code == 422


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        response = client.get(f"{settings.api_prefix}/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.post(QUERY_URL, json={"start": 1})
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, client: TestClient) -> None:
        """Exceeding the per-route limit returns HTTP 429."""
        limit = int(settings.rate_limit_default.split("/")[0])
        params = {"referenceName": "1", "assemblyId": "hg19"}
        for _ in range(limit):
            assert client.get(QUERY_URL, params=params).status_code == 200

        response = client.get(QUERY_URL, params=params)
        assert response.status_code == 429
        assert response.json()["error"] == "Rate limit exceeded"
