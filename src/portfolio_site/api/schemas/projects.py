"""Pydantic schemas for project API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from portfolio_site.api.schemas.common import RequiredText


class ProjectResponse(BaseModel):
    """Public-facing project for API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    image: str | None = None
    title: str
    description: str | None = None
    link: str
    created_at: datetime


class ProjectCreateRequest(BaseModel):
    title: RequiredText
    description: str | None = None
    link: RequiredText


class ProjectUpdateRequest(BaseModel):
    """Fields allowed to be updated for a project."""

    title: RequiredText | None = None
    description: str | None = None
    link: RequiredText | None = None
