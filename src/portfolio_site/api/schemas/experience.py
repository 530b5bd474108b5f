"""Pydantic schemas for experience API endpoints."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from portfolio_site.api.schemas.common import RequiredText
from portfolio_site.web.forms import text_to_description


def _parse_description(value: object) -> object:
    """Accept a JSON array string, newline separated text, or a list."""
    if value is None or isinstance(value, list):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            try:
                parsed = json.loads(stripped)
            except ValueError:
                parsed = None
            if isinstance(parsed, list):
                return [str(item).strip() for item in parsed if str(item).strip()]
        return text_to_description(value)
    return value


class ExperienceResponse(BaseModel):
    """Response schema for experience data."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    logo: str | None = None
    title: str
    company: str
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: list[str] = Field(default_factory=list)
    created_at: datetime


class ExperienceCreateRequest(BaseModel):
    """Form fields for creating an experience entry."""

    title: RequiredText = Field(..., description="Job title")
    company: RequiredText = Field(..., description="Company name")
    location: str | None = Field(None, description="e.g. Dhaka, Bangladesh")
    start_date: str | None = Field(None, description="e.g. Oct 2023")
    end_date: str | None = Field(None, description="e.g. Present")
    description: list[str] | None = Field(
        None, description="Bullet points: JSON array or one per line"
    )

    @field_validator("description", mode="before")
    @classmethod
    def split_description(cls, value: object) -> object:
        return _parse_description(value)


class ExperienceUpdateRequest(BaseModel):
    """Form fields for updating an experience entry.

    All fields are optional; only provided fields are updated.
    """

    title: RequiredText | None = Field(None, description="Job title")
    company: RequiredText | None = Field(None, description="Company name")
    location: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: list[str] | None = None

    @field_validator("description", mode="before")
    @classmethod
    def split_description(cls, value: object) -> object:
        return _parse_description(value)
