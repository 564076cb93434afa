"""
Integration tests for the v1 passthrough endpoints.
"""
from fastapi.testclient import TestClient


class TestLegacyPassthrough:
    def test_customers_returned_raw(self, test_client: TestClient, legacy_users):
        response = test_client.get("/api/v1/customers")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": legacy_users}

    def test_payment_by_id_returned_raw(self, test_client: TestClient, legacy_posts):
        response = test_client.get("/api/v1/payments/1")

        assert response.status_code == 200
        assert response.json()["data"] == legacy_posts[0]

    def test_passthrough_is_not_cached(self, test_client: TestClient, legacy_api, cache):
        test_client.get("/api/v1/customers/1")
        test_client.get("/api/v1/customers/1")

        assert legacy_api.calls["/users/1"] == 2
        assert cache.size() == 0

    def test_upstream_failure_returns_503(self, test_client: TestClient, legacy_api):
        legacy_api.failure_status = 500

        response = test_client.get("/api/v1/payments")

        assert response.status_code == 503
        assert response.json()["source"] == "legacy-api"
