"""Project service for the portfolio's showcased work."""

from __future__ import annotations

import logging
from typing import TypedDict

from portfolio_site.data.db import Database
from portfolio_site.data.models import Project
from portfolio_site.services.exceptions import NotFoundError, ValidationError
from portfolio_site.services.records import (
    DeleteResult,
    UpdateResult,
    apply_updates,
    check_required,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ProjectData",
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "delete_project",
]

_REQUIRED_FIELDS = ("title", "link")
_PROJECT_FIELDS = ("title", "description", "link")


class ProjectData(TypedDict, total=False):
    """TypedDict for project data."""

    title: str
    description: str | None
    link: str


def _project_to_dict(project: Project) -> dict:
    return {
        "id": project.id,
        "image": project.image,
        "title": project.title,
        "description": project.description,
        "link": project.link,
        "created_at": project.created_at,
    }


def list_projects(db: Database) -> list[dict]:
    """Get all projects, newest first."""
    with db.session() as session:
        projects = (
            session.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()
        )
        return [_project_to_dict(p) for p in projects]


def get_project(db: Database, project_id: int) -> dict:
    """Get a project by ID, raising ``NotFoundError`` if absent."""
    with db.session() as session:
        project = session.get(Project, project_id)
        if project is None:
            raise NotFoundError("Project", project_id)
        return _project_to_dict(project)


def create_project(db: Database, data: ProjectData, image: str | None = None) -> dict:
    """Create a project. 'title' and 'link' must be non-empty."""
    try:
        check_required(data, _REQUIRED_FIELDS, partial=False)
    except ValidationError as exc:
        logger.warning("Validation failed for project: %s", exc)
        raise

    try:
        with db.session() as session:
            project = Project(image=image)
            apply_updates(project, data, _PROJECT_FIELDS)
            session.add(project)
            session.flush()
            return _project_to_dict(project)
    except Exception:
        logger.exception("Failed to create project")
        raise


def update_project(
    db: Database, project_id: int, data: ProjectData, image: str | None = None
) -> UpdateResult:
    """Overwrite the supplied fields of a project; a new image replaces the old one."""
    try:
        check_required(data, _REQUIRED_FIELDS, partial=True)
    except ValidationError as exc:
        logger.warning("Validation failed for project update: %s", exc)
        raise

    try:
        with db.session() as session:
            project = session.get(Project, project_id)
            if project is None:
                raise NotFoundError("Project", project_id)

            apply_updates(project, data, _PROJECT_FIELDS)
            replaced = None
            if image is not None:
                replaced = project.image if project.image != image else None
                project.image = image
            session.flush()
            return UpdateResult(record=_project_to_dict(project), replaced_file=replaced)
    except NotFoundError:
        raise
    except Exception:
        logger.exception("Failed to update project %d", project_id)
        raise


def delete_project(db: Database, project_id: int) -> DeleteResult:
    """Delete a project; a missing id yields ``deleted=False``."""
    try:
        with db.session() as session:
            project = session.get(Project, project_id)
            if project is None:
                return DeleteResult(deleted=False)
            image = project.image
            session.delete(project)
            return DeleteResult(deleted=True, file_ref=image)
    except Exception:
        logger.exception("Failed to delete project %d", project_id)
        raise
