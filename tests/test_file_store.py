"""Tests for the upload file store."""

from __future__ import annotations

import re

from portfolio_site.services.file_store import FileStore, is_external_reference, resolve_url


def test_store_writes_file_and_returns_reference(file_store: FileStore) -> None:
    reference = file_store.store(b"image-bytes", "logo.PNG")

    assert re.fullmatch(r"/uploads/\d+-\d+\.PNG", reference)
    path = file_store.path_for(reference)
    assert path is not None
    assert path.read_bytes() == b"image-bytes"


def test_store_without_extension(file_store: FileStore) -> None:
    reference = file_store.store(b"x", "README")

    assert "." not in reference.rsplit("/", 1)[1]


def test_generated_names_are_unique(file_store: FileStore) -> None:
    names = {file_store.generate_name("a.jpg") for _ in range(50)}

    assert len(names) == 50
    assert all(name.endswith(".jpg") for name in names)


def test_path_for_rejects_foreign_references(file_store: FileStore) -> None:
    assert file_store.path_for(None) is None
    assert file_store.path_for("https://cdn.example.com/a.png") is None
    assert file_store.path_for("/static/img/avatar.svg") is None
    assert file_store.path_for("/uploads/../secret.txt") is None
    assert file_store.path_for("/uploads/") is None


def test_discard_removes_only_owned_files(file_store: FileStore) -> None:
    reference = file_store.store(b"x", "a.png")

    assert file_store.discard(reference) is True
    assert file_store.path_for(reference).exists() is False
    assert file_store.discard(reference) is False
    assert file_store.discard("https://cdn.example.com/a.png") is False
    assert file_store.discard(None) is False


def test_resolve_url() -> None:
    assert resolve_url(None) is None
    assert resolve_url("") is None
    assert resolve_url("/uploads/a.png") == "/uploads/a.png"
    assert resolve_url("/uploads/a.png", "http://localhost:3001/") == (
        "http://localhost:3001/uploads/a.png"
    )
    assert resolve_url("https://cdn.example.com/a.png", "http://x") == (
        "https://cdn.example.com/a.png"
    )
    assert is_external_reference("HTTP://cdn.example.com/a.png") is True


def test_store_resolve_prefixes_origin(file_store: FileStore) -> None:
    reference = file_store.store(b"x", "a.png")

    assert file_store.resolve(reference, "https://api.example.com") == (
        f"https://api.example.com{reference}"
    )
    assert file_store.resolve("https://cdn.example.com/a.png", "https://api.example.com") == (
        "https://cdn.example.com/a.png"
    )
    assert file_store.resolve(None) is None
