"""Pydantic schemas for education API endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portfolio_site.api.schemas.common import RequiredText


class EducationResponse(BaseModel):
    """Response schema for education data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    logo: str | None = None
    degree: str
    institution: str
    location: str | None = None
    year: str | None = None
    created_at: datetime


class EducationCreateRequest(BaseModel):
    """Request schema for creating an education entry."""

    degree: RequiredText = Field(..., description="Degree (e.g., Bachelor of Science)")
    institution: RequiredText = Field(..., description="School or university name")
    location: str | None = Field(None, description="City or campus")
    year: str | None = Field(None, description="Graduation year")


class EducationUpdateRequest(BaseModel):
    """Request schema for updating an education entry.

    All fields are optional; only provided fields are updated.
    """

    degree: RequiredText | None = Field(None, description="Degree")
    institution: RequiredText | None = Field(None, description="School or university name")
    location: str | None = Field(None, description="City or campus")
    year: str | None = Field(None, description="Graduation year")
