"""Tests for the server-rendered public page and admin views."""

from __future__ import annotations

from dataclasses import replace

from fastapi.testclient import TestClient

from portfolio_site.api.main import create_app
from portfolio_site.config import Settings
from portfolio_site.web.profile import DEFAULT_PROFILE

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake"


def test_home_renders_content(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post(
        "/api/experience",
        data={"title": "Backend Engineer", "company": "Zentorra", "description": "Built APIs"},
        files={"logo": ("z.png", PNG_BYTES, "image/png")},
        headers=auth_headers,
    )
    client.post(
        "/api/education",
        data={"degree": "BSc CSE", "institution": "BRAC University"},
        headers=auth_headers,
    )
    client.post(
        "/api/projects",
        data={"title": "Portfolio", "link": "https://example.com/portfolio"},
        headers=auth_headers,
    )

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    html = response.text
    assert DEFAULT_PROFILE.name in html
    assert "Backend Engineer" in html
    assert "Built APIs" in html
    assert "BRAC University" in html
    assert "https://example.com/portfolio" in html
    assert 'src="/uploads/' in html


def test_home_with_no_content(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "No experience added yet." in response.text
    assert 'href="/admin"' in response.text
    assert "/static/js/site.js" in response.text


def test_home_escapes_user_content(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post(
        "/api/projects",
        data={"title": "<script>alert(1)</script>", "link": "https://x.test"},
        headers=auth_headers,
    )

    html = client.get("/").text

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_admin_login_page(client: TestClient) -> None:
    response = client.get("/admin")

    assert response.status_code == 200
    assert "Admin Login" in response.text
    assert "/static/js/admin.js" in response.text


def test_admin_dashboard_links_every_section(client: TestClient) -> None:
    html = client.get("/admin/dashboard").text

    for kind in ("experience", "education", "projects"):
        assert f'href="/admin/dashboard/{kind}"' in html


def test_manager_lists_records(client: TestClient, auth_headers: dict[str, str]) -> None:
    client.post(
        "/api/experience",
        data={
            "title": "Engineer",
            "company": "Acme",
            "start_date": "Jan 2020",
            "end_date": "Present",
            "description": "one\ntwo",
        },
        headers=auth_headers,
    )

    response = client.get("/admin/dashboard/experience")

    assert response.status_code == 200
    html = response.text
    assert "Manage Experience" in html
    assert "Jan 2020 - Present" in html
    assert 'data-api-path="/experience"' in html
    assert 'name="logo"' in html
    assert 'name="description"' in html


def test_manager_unknown_section_is_404(client: TestClient) -> None:
    assert client.get("/admin/dashboard/unknown").status_code == 404


def test_asset_urls_use_configured_origin(settings: Settings) -> None:
    app = create_app(replace(settings, api_origin="https://api.example.com"))

    with TestClient(app) as client:
        token = client.post(
            "/api/auth/login", json={"username": "admin", "password": "admin123"}
        ).json()["token"]
        client.post(
            "/api/experience",
            data={"title": "Engineer", "company": "Acme"},
            files={"logo": ("a.png", PNG_BYTES, "image/png")},
            headers={"Authorization": f"Bearer {token}"},
        )

        home = client.get("/").text
        manager = client.get("/admin/dashboard/experience").text

    assert 'src="https://api.example.com/uploads/' in home
    assert 'content="https://api.example.com/api"' in home
    assert 'src="https://api.example.com/uploads/' in manager
