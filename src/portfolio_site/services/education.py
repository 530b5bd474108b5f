"""Education service for managing academic background entries.

This service provides CRUD operations for Education data.
"""

from __future__ import annotations

import logging
from typing import TypedDict

from sqlalchemy.orm import Session

from portfolio_site.data.db import Database
from portfolio_site.data.models import Education
from portfolio_site.services.exceptions import NotFoundError, ValidationError
from portfolio_site.services.records import (
    DeleteResult,
    UpdateResult,
    apply_updates,
    check_required,
)

logger = logging.getLogger(__name__)

__all__ = [
    "EducationData",
    "list_educations",
    "get_education",
    "create_education",
    "update_education",
    "delete_education",
]

_REQUIRED_FIELDS = ("degree", "institution")

# Fields that can be updated on Education
_EDUCATION_FIELDS = (
    "degree",
    "institution",
    "location",
    "year",
)


class EducationData(TypedDict, total=False):
    """TypedDict for education data."""

    degree: str
    institution: str
    location: str | None
    year: str | None


def _education_to_dict(education: Education) -> dict:
    """Convert an Education model to a dictionary.

    Args:
        education: Education model instance

    Returns:
        Dictionary with education data
    """
    return {
        "id": education.id,
        "logo": education.logo,
        "degree": education.degree,
        "institution": education.institution,
        "location": education.location,
        "year": education.year,
        "created_at": education.created_at,
    }


def _get_education_by_id(session: Session, education_id: int) -> Education | None:
    """Get an education entry by ID."""
    return session.get(Education, education_id)


def list_educations(db: Database) -> list[dict]:
    """Get all education entries, newest first.

    Args:
        db: Database to read from

    Returns:
        List of education dictionaries
    """
    with db.session() as session:
        educations = (
            session.query(Education)
            .order_by(Education.created_at.desc(), Education.id.desc())
            .all()
        )
        return [_education_to_dict(e) for e in educations]


def get_education(db: Database, education_id: int) -> dict:
    """Get a specific education entry by ID.

    Raises:
        NotFoundError: If no entry has this id.
    """
    with db.session() as session:
        education = _get_education_by_id(session, education_id)
        if education is None:
            raise NotFoundError("Education", education_id)
        return _education_to_dict(education)


def create_education(db: Database, education_data: EducationData, logo: str | None = None) -> dict:
    """Create a new education entry.

    Args:
        db: Database to write to
        education_data: Dictionary containing education fields.
                       Must include 'degree' and 'institution'.
        logo: File reference of an already stored logo

    Returns:
        Dictionary with created education data

    Raises:
        ValidationError: If a required field is missing or empty.
    """
    try:
        check_required(education_data, _REQUIRED_FIELDS, partial=False)
    except ValidationError as exc:
        logger.warning("Validation failed for education: %s", exc)
        raise

    try:
        with db.session() as session:
            new_education = Education(logo=logo)
            apply_updates(new_education, education_data, _EDUCATION_FIELDS)
            session.add(new_education)
            session.flush()
            return _education_to_dict(new_education)
    except Exception:
        logger.exception("Failed to create education")
        raise


def update_education(
    db: Database, education_id: int, education_data: EducationData, logo: str | None = None
) -> UpdateResult:
    """Update an existing education entry. Only supplied fields are updated.

    Args:
        db: Database to write to
        education_id: ID of the education entry to update
        education_data: Dictionary containing fields to update
        logo: New logo reference, or None to keep the current one

    Raises:
        NotFoundError: If no entry has this id.
        ValidationError: If a supplied required field is empty.
    """
    try:
        check_required(education_data, _REQUIRED_FIELDS, partial=True)
    except ValidationError as exc:
        logger.warning("Validation failed for education update: %s", exc)
        raise

    try:
        with db.session() as session:
            education = _get_education_by_id(session, education_id)
            if education is None:
                raise NotFoundError("Education", education_id)

            apply_updates(education, education_data, _EDUCATION_FIELDS)
            replaced = None
            if logo is not None:
                replaced = education.logo if education.logo != logo else None
                education.logo = logo
            session.flush()
            return UpdateResult(record=_education_to_dict(education), replaced_file=replaced)
    except NotFoundError:
        raise
    except Exception:
        logger.exception("Failed to update education %d", education_id)
        raise


def delete_education(db: Database, education_id: int) -> DeleteResult:
    """Delete an education entry.

    Args:
        db: Database to write to
        education_id: ID of the education entry to delete

    Returns:
        DeleteResult; ``deleted`` is False when the id did not exist
    """
    try:
        with db.session() as session:
            education = _get_education_by_id(session, education_id)
            if education is None:
                return DeleteResult(deleted=False)
            logo = education.logo
            session.delete(education)
            return DeleteResult(deleted=True, file_ref=logo)
    except Exception:
        logger.exception("Failed to delete education %d", education_id)
        raise
