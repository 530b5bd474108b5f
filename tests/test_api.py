"""Tests for application wiring: health, CORS and API schema."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_health_check(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_openapi_lists_resource_routes(client: TestClient) -> None:
    paths = client.get("/openapi.json").json()["paths"]

    for path in ("/api/experience", "/api/education", "/api/projects", "/api/auth/login"):
        assert path in paths
    assert "/api/experience/{experience_id}" in paths
    body = paths["/api/projects"]["post"]["requestBody"]["content"]["multipart/form-data"]
    assert body["schema"]["properties"]["image"]["format"] == "binary"
    assert "/admin" not in paths


def test_cors_preflight(client: TestClient) -> None:
    response = client.options(
        "/api/experience",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {"*", "http://localhost:5173"}


def test_static_assets_served(client: TestClient) -> None:
    assert client.get("/static/css/site.css").status_code == 200
    assert client.get("/static/js/admin.js").status_code == 200
    assert client.get("/uploads/missing.png").status_code == 404
