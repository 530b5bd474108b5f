"""Test suite for experience service."""

from __future__ import annotations

import pytest

from portfolio_site.data.db import Database
from portfolio_site.services.exceptions import NotFoundError, ValidationError
from portfolio_site.services.experience import (
    create_experience,
    delete_experience,
    get_experience,
    list_experiences,
    update_experience,
)


def test_create_and_get(db: Database) -> None:
    created = create_experience(
        db,
        {
            "title": "  Engineer ",
            "company": "Acme",
            "location": "",
            "start_date": "Jan 2020",
            "description": ["Built things", "  ", "Shipped things "],
        },
        logo="/uploads/1-1.png",
    )

    fetched = get_experience(db, created["id"])
    assert fetched["title"] == "Engineer"
    assert fetched["company"] == "Acme"
    assert fetched["location"] is None
    assert fetched["end_date"] is None
    assert fetched["logo"] == "/uploads/1-1.png"
    assert fetched["description"] == ["Built things", "Shipped things"]
    assert fetched["created_at"] is not None


def test_description_defaults_to_empty_list(db: Database) -> None:
    created = create_experience(db, {"title": "A", "company": "B"})

    assert created["description"] == []
    assert get_experience(db, created["id"])["description"] == []


@pytest.mark.parametrize("missing", ["title", "company"])
def test_create_requires_title_and_company(db: Database, missing: str) -> None:
    data = {"title": "Engineer", "company": "Acme"}
    data[missing] = "   "

    with pytest.raises(ValidationError) as exc_info:
        create_experience(db, data)

    assert exc_info.value.field == missing
    assert list_experiences(db) == []


def test_list_newest_first(db: Database) -> None:
    first = create_experience(db, {"title": "First", "company": "A"})
    second = create_experience(db, {"title": "Second", "company": "B"})

    ids = [item["id"] for item in list_experiences(db)]
    assert ids == [second["id"], first["id"]]


def test_update_only_changes_supplied_fields(db: Database) -> None:
    created = create_experience(
        db,
        {"title": "Engineer", "company": "Acme", "location": "Dhaka", "description": ["a"]},
        logo="/uploads/old.png",
    )

    result = update_experience(db, created["id"], {"title": "Lead", "location": ""})

    assert result.replaced_file is None
    assert result.record["title"] == "Lead"
    assert result.record["company"] == "Acme"
    assert result.record["location"] is None
    assert result.record["description"] == ["a"]
    assert result.record["logo"] == "/uploads/old.png"


def test_update_with_new_logo_reports_replaced_file(db: Database) -> None:
    created = create_experience(db, {"title": "E", "company": "C"}, logo="/uploads/old.png")

    result = update_experience(db, created["id"], {}, logo="/uploads/new.png")

    assert result.replaced_file == "/uploads/old.png"
    assert get_experience(db, created["id"])["logo"] == "/uploads/new.png"


def test_update_rejects_empty_required_field(db: Database) -> None:
    created = create_experience(db, {"title": "E", "company": "C"})

    with pytest.raises(ValidationError):
        update_experience(db, created["id"], {"company": ""})

    assert get_experience(db, created["id"])["company"] == "C"


def test_missing_ids(db: Database) -> None:
    with pytest.raises(NotFoundError):
        get_experience(db, 999)
    with pytest.raises(NotFoundError):
        update_experience(db, 999, {"title": "X"})

    result = delete_experience(db, 999)
    assert result.deleted is False
    assert result.file_ref is None


def test_delete_returns_file_reference(db: Database) -> None:
    created = create_experience(db, {"title": "E", "company": "C"}, logo="/uploads/a.png")

    result = delete_experience(db, created["id"])

    assert result.deleted is True
    assert result.file_ref == "/uploads/a.png"
    assert list_experiences(db) == []
