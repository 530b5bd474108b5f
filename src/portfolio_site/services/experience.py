"""Experience service for managing work history entries.

This service provides CRUD operations for Experience data, used by the
REST API and the public page.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from sqlalchemy.orm import Session

from portfolio_site.data.db import Database
from portfolio_site.data.models import Experience
from portfolio_site.services.exceptions import NotFoundError, ValidationError
from portfolio_site.services.records import (
    DeleteResult,
    UpdateResult,
    apply_updates,
    check_required,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ExperienceData",
    "list_experiences",
    "get_experience",
    "create_experience",
    "update_experience",
    "delete_experience",
]

_REQUIRED_FIELDS = ("title", "company")

# Text fields that can be updated on Experience
_TEXT_FIELDS = (
    "title",
    "company",
    "location",
    "start_date",
    "end_date",
)


class ExperienceData(TypedDict, total=False):
    """TypedDict for experience data."""

    title: str
    company: str
    location: str | None
    start_date: str | None
    end_date: str | None
    description: list[str]


def _experience_to_dict(experience: Experience) -> dict:
    """Convert an Experience model to a dictionary."""
    return {
        "id": experience.id,
        "logo": experience.logo,
        "title": experience.title,
        "company": experience.company,
        "location": experience.location,
        "start_date": experience.start_date,
        "end_date": experience.end_date,
        "description": list(experience.description or []),
        "created_at": experience.created_at,
    }


def _get_experience_by_id(session: Session, experience_id: int) -> Experience | None:
    return session.get(Experience, experience_id)


def _apply_experience_updates(experience: Experience, data: ExperienceData) -> None:
    apply_updates(experience, data, _TEXT_FIELDS)
    if "description" in data:
        experience.description = [
            line.strip() for line in data["description"] or [] if line and line.strip()
        ]


def list_experiences(db: Database) -> list[dict]:
    """Get all experience entries, newest first."""
    with db.session() as session:
        experiences = (
            session.query(Experience)
            .order_by(Experience.created_at.desc(), Experience.id.desc())
            .all()
        )
        return [_experience_to_dict(e) for e in experiences]


def get_experience(db: Database, experience_id: int) -> dict:
    """Get a specific experience entry.

    Raises:
        NotFoundError: If no entry has this id.
    """
    with db.session() as session:
        experience = _get_experience_by_id(session, experience_id)
        if experience is None:
            raise NotFoundError("Experience", experience_id)
        return _experience_to_dict(experience)


def create_experience(db: Database, data: ExperienceData, logo: str | None = None) -> dict:
    """Create a new experience entry.

    Args:
        db: Database to write to.
        data: Experience fields. Must include non-empty 'title' and 'company'.
        logo: File reference of an already stored logo.

    Returns:
        Dictionary with the created experience.

    Raises:
        ValidationError: If a required field is missing or empty.
    """
    try:
        check_required(data, _REQUIRED_FIELDS, partial=False)
    except ValidationError as exc:
        logger.warning("Validation failed for experience: %s", exc)
        raise

    try:
        with db.session() as session:
            experience = Experience(logo=logo, description=[])
            _apply_experience_updates(experience, data)
            session.add(experience)
            session.flush()
            return _experience_to_dict(experience)
    except Exception:
        logger.exception("Failed to create experience")
        raise


def update_experience(
    db: Database, experience_id: int, data: ExperienceData, logo: str | None = None
) -> UpdateResult:
    """Update an existing experience entry. Only supplied fields change.

    Args:
        db: Database to write to.
        experience_id: ID of the entry to update.
        data: Fields to overwrite.
        logo: New logo reference; None keeps the current logo.

    Raises:
        NotFoundError: If no entry has this id.
        ValidationError: If a supplied required field is empty.
    """
    try:
        check_required(data, _REQUIRED_FIELDS, partial=True)
    except ValidationError as exc:
        logger.warning("Validation failed for experience update: %s", exc)
        raise

    try:
        with db.session() as session:
            experience = _get_experience_by_id(session, experience_id)
            if experience is None:
                raise NotFoundError("Experience", experience_id)

            _apply_experience_updates(experience, data)
            replaced = None
            if logo is not None:
                replaced = experience.logo if experience.logo != logo else None
                experience.logo = logo
            session.flush()
            return UpdateResult(record=_experience_to_dict(experience), replaced_file=replaced)
    except NotFoundError:
        raise
    except Exception:
        logger.exception("Failed to update experience %d", experience_id)
        raise


def delete_experience(db: Database, experience_id: int) -> DeleteResult:
    """Delete an experience entry. A missing id is reported, not raised."""
    try:
        with db.session() as session:
            experience = _get_experience_by_id(session, experience_id)
            if experience is None:
                return DeleteResult(deleted=False)
            logo = experience.logo
            session.delete(experience)
            return DeleteResult(deleted=True, file_ref=logo)
    except Exception:
        logger.exception("Failed to delete experience %d", experience_id)
        raise
