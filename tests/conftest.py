from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portfolio_site.api.main import create_app
from portfolio_site.config import Settings
from portfolio_site.data.db import Database
from portfolio_site.services.file_store import FileStore


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary SQLite DB and upload directory."""
    return Settings(
        database_url=f"sqlite:///{(tmp_path / 'portfolio.db').as_posix()}",
        upload_dir=tmp_path / "uploads",
        jwt_secret="test-secret",
    )


@pytest.fixture
def db(settings: Settings) -> Iterator[Database]:
    """Initialized database for service tests."""
    database = Database(settings.database_url)
    database.init()
    yield database
    database.dispose()


@pytest.fixture
def file_store(settings: Settings) -> FileStore:
    return FileStore(settings.upload_dir, settings.upload_url_prefix)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with the app's startup (tables, admin account) applied."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client: TestClient, settings: Settings) -> dict[str, str]:
    response = client.post(
        "/api/auth/login",
        json={"username": settings.admin_username, "password": settings.admin_password},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
