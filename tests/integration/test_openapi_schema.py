import pytest

pytestmark = pytest.mark.integration


def test_schema_lists_order_endpoints(client):
    response = client.get("/api/schema/", {"format": "json"})
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/orders/" in paths
    assert "/api/v1/orders/{id}/cancel/" in paths
    assert "/api/v1/customers/by-email/" in paths
