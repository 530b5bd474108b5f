"""Pydantic schemas for the login endpoint."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class LoginRequest(BaseModel):
    """Credentials submitted by the admin login form.

    Missing, null and non-string values are treated as empty so that they
    fail like any other wrong credential instead of producing a schema error.
    """

    username: str = ""
    password: str = ""

    @field_validator("username", "password", mode="before")
    @classmethod
    def blank_non_text(cls, value: object) -> object:
        return value if isinstance(value, str) else ""


class LoginResponse(BaseModel):
    token: str
    username: str


class IdentityResponse(BaseModel):
    id: int
    username: str
