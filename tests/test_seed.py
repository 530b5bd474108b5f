"""Tests for demo content seeding."""

from __future__ import annotations

from portfolio_site.data.db import Database
from portfolio_site.services.education import list_educations
from portfolio_site.services.experience import create_experience, list_experiences
from portfolio_site.services.seed import DEMO_EDUCATION, DEMO_EXPERIENCES, seed_demo_content


def test_seed_fills_empty_tables_once(db: Database) -> None:
    inserted = seed_demo_content(db)

    assert inserted == {"experience": len(DEMO_EXPERIENCES), "education": len(DEMO_EDUCATION)}
    companies = {item["company"] for item in list_experiences(db)}
    assert companies == {"AlgoVerse", "Zentorra"}
    assert list_educations(db)[0]["institution"] == "BRAC University"

    assert seed_demo_content(db) == {"experience": 0, "education": 0}
    assert len(list_experiences(db)) == len(DEMO_EXPERIENCES)


def test_seed_skips_tables_with_content(db: Database) -> None:
    create_experience(db, {"title": "Mine", "company": "Own"})

    inserted = seed_demo_content(db)

    assert inserted["experience"] == 0
    assert inserted["education"] == len(DEMO_EDUCATION)
    assert [item["title"] for item in list_experiences(db)] == ["Mine"]
