"""
End-to-end flow against a real PostgreSQL database

Skipped unless DATABASE_URL is configured (environment or .env).
"""
import os
import uuid

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture(scope="module")
def live_client():
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        pytest.skip("DATABASE_URL not configured")

    settings = Settings(
        DATABASE_URL=database_url,
        JWT_SECRET="integration-secret",
        BCRYPT_ROUNDS=4,
        AUTO_CREATE_SCHEMA=True,
        LOG_LEVEL="WARNING",
    )
    # Entering the client runs the lifespan, which creates the schema
    with TestClient(create_app(settings)) as client:
        yield client


def vendor_headers(client, email, password="secret1"):
    response = client.post("/api/vendors/register", json={"name": "IT", "email": email, "password": password})
    assert response.status_code == 201, response.text
    token = client.post("/api/vendors/login", json={"email": email, "password": password}).json()["token"]
    return {"Authorization": f"Bearer {token}"}


def test_full_flow_with_tenant_isolation(live_client):
    suffix = uuid.uuid4().hex[:8]
    t1 = vendor_headers(live_client, f"v1-{suffix}@x.com")
    t2 = vendor_headers(live_client, f"v2-{suffix}@x.com")

    duplicate = live_client.post(
        "/api/vendors/register", json={"name": "Again", "email": f"v1-{suffix}@x.com", "password": "secret9"}
    )
    assert duplicate.status_code == 400

    product = live_client.post("/api/products", json={"name": "Widget", "price": 9.99, "stock": 5}, headers=t1)
    assert product.status_code == 201
    product_id = product.json()["id"]

    assert [p["id"] for p in live_client.get("/api/products", headers=t1).json()] == [product_id]
    assert live_client.get("/api/products", headers=t2).json() == []
    assert live_client.get(f"/api/products/{product_id}", headers=t2).status_code == 404
    assert live_client.put(f"/api/products/{product_id}", json={"price": 0}, headers=t2).status_code == 404
    assert live_client.delete(f"/api/products/{product_id}", headers=t2).status_code == 404

    updated = live_client.put(f"/api/products/{product_id}", json={"stock": 4, "vendor": "x"}, headers=t1)
    assert updated.status_code == 200
    assert updated.json()["stock"] == 4

    order = live_client.post("/api/orders", json={"product": product_id, "quantity": 2}, headers=t1)
    assert order.status_code == 201
    order_id = order.json()["id"]

    assert live_client.get("/api/orders", headers=t2).json() == []
    assert live_client.put(f"/api/orders/{order_id}", headers=t2).status_code == 404
    for _ in range(2):
        shipped = live_client.put(f"/api/orders/{order_id}", headers=t1)
        assert shipped.status_code == 200
        assert shipped.json()["status"] == "shipped"

    assert live_client.delete(f"/api/products/{product_id}", headers=t1).status_code == 200
    orders = live_client.get("/api/orders", headers=t1).json()
    assert orders[0]["id"] == order_id
    assert orders[0]["product"] is None


def test_health_reports_connected(live_client):
    assert live_client.get("/health").json()["database"] == "connected"
