"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from portfolio_site.cli import run_cli
from portfolio_site.config import Settings
from portfolio_site.data.db import Database
from portfolio_site.services.auth import login
from portfolio_site.services.experience import list_experiences


def _fake_getpass(monkeypatch: pytest.MonkeyPatch, *answers: str) -> None:
    replies = iter(answers)
    monkeypatch.setattr("getpass.getpass", lambda prompt="": next(replies))


def test_init_db_provisions_admin(settings: Settings) -> None:
    assert run_cli(["init-db"], settings=settings) == 0

    db = Database(settings.database_url)
    try:
        assert login(db, settings, "admin", "admin123").username == "admin"
        assert list_experiences(db) == []
    finally:
        db.dispose()
    assert settings.upload_dir.is_dir()


def test_set_password(
    settings: Settings, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    run_cli(["init-db"], settings=settings)
    _fake_getpass(monkeypatch, "rotated", "rotated")

    assert run_cli(["set-password", "admin"], settings=settings) == 0
    assert "Password updated for admin" in capsys.readouterr().out

    db = Database(settings.database_url)
    try:
        assert login(db, settings, "admin", "rotated").token
    finally:
        db.dispose()


def test_set_password_mismatch(
    settings: Settings, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _fake_getpass(monkeypatch, "one", "two")

    assert run_cli(["set-password", "admin"], settings=settings) == 1
    assert "do not match" in capsys.readouterr().err


def test_set_password_rejects_empty(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    _fake_getpass(monkeypatch, "")

    assert run_cli(["set-password", "admin"], settings=settings) == 1


def test_serve_runs_uvicorn(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, dict]] = []
    monkeypatch.setattr("uvicorn.run", lambda target, **kwargs: calls.append((target, kwargs)))

    assert run_cli(["serve", "--port", "4000"], settings=settings) == 0

    target, kwargs = calls[0]
    assert target == "portfolio_site.api.main:create_app"
    assert kwargs["factory"] is True
    assert kwargs["port"] == 4000
    assert kwargs["reload"] is False
    assert kwargs["log_config"] is None


def test_seeded_startup(tmp_path: Path) -> None:
    settings = Settings(
        database_url=f"sqlite:///{(tmp_path / 'seeded.db').as_posix()}",
        upload_dir=tmp_path / "uploads",
        seed_demo_content=True,
    )

    assert run_cli(["init-db"], settings=settings) == 0

    db = Database(settings.database_url)
    try:
        assert {e["company"] for e in list_experiences(db)} == {"AlgoVerse", "Zentorra"}
    finally:
        db.dispose()
