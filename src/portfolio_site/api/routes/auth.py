"""Admin login routes."""

from __future__ import annotations

from fastapi import APIRouter

from portfolio_site.api.dependencies import AdminDep, DatabaseDep, SettingsDep
from portfolio_site.api.schemas.auth import IdentityResponse, LoginRequest, LoginResponse
from portfolio_site.api.schemas.common import AUTH_RESPONSES, ErrorResponse
from portfolio_site.services.auth import login

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
def login_endpoint(payload: LoginRequest, db: DatabaseDep, settings: SettingsDep) -> LoginResponse:
    """Exchange the admin username and password for a session token."""
    result = login(db, settings, payload.username, payload.password)
    return LoginResponse(token=result.token, username=result.username)


@router.get("/me", response_model=IdentityResponse, responses=AUTH_RESPONSES)
def current_admin(admin: AdminDep) -> IdentityResponse:
    """Return the identity carried by the presented session token."""
    return IdentityResponse(id=admin.id, username=admin.username)
