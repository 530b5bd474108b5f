"""Tests for the admin form helpers."""

from __future__ import annotations

from portfolio_site.web.forms import (
    EDUCATION_FORM,
    EXPERIENCE_FORM,
    PROJECTS_FORM,
    RESOURCE_FORMS,
    description_to_text,
    record_to_form_values,
    table_cell,
    text_to_description,
)


def test_description_text_conversion() -> None:
    assert text_to_description("A\nB\n\n  C  \n") == ["A", "B", "C"]
    assert text_to_description("") == []
    assert text_to_description(None) == []
    assert description_to_text(["A", "B"]) == "A\nB"
    assert description_to_text(None) == ""


def test_record_to_form_values() -> None:
    record = {
        "id": 1,
        "title": "Engineer",
        "company": "Acme",
        "location": None,
        "start_date": "Jan 2020",
        "end_date": None,
        "description": ["one", "two"],
    }

    values = record_to_form_values(EXPERIENCE_FORM, record)

    assert values == {
        "title": "Engineer",
        "company": "Acme",
        "location": "",
        "start_date": "Jan 2020",
        "end_date": "",
        "description": "one\ntwo",
    }


def test_table_cells() -> None:
    record = {"start_date": "Oct 2023", "end_date": "Present", "title": "Dev"}

    assert table_cell(EXPERIENCE_FORM, record, "duration") == "Oct 2023 - Present"
    assert table_cell(EXPERIENCE_FORM, {}, "duration") == ""
    assert table_cell(EXPERIENCE_FORM, record, "title") == "Dev"
    assert table_cell(EDUCATION_FORM, {"year": None}, "year") == ""


def test_resource_forms_registry() -> None:
    assert set(RESOURCE_FORMS) == {"experience", "education", "projects"}
    assert PROJECTS_FORM.file_field == "image"
    assert EXPERIENCE_FORM.api_path == "/experience"
