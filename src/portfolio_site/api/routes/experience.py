"""Experience routes for the API."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Request

from portfolio_site.api.dependencies import (
    AdminDep,
    DatabaseDep,
    FileStoreDep,
    read_submission,
    store_upload,
)
from portfolio_site.api.schemas.common import (
    AUTH_RESPONSES,
    CreatedResponse,
    ErrorResponse,
    MessageResponse,
    multipart_body,
    parse_form,
)
from portfolio_site.api.schemas.experience import (
    ExperienceCreateRequest,
    ExperienceResponse,
    ExperienceUpdateRequest,
)
from portfolio_site.services.experience import (
    create_experience,
    delete_experience,
    list_experiences,
    update_experience,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/experience", tags=["experience"])

FILE_FIELD = "logo"
_FIELDS = tuple(ExperienceCreateRequest.model_fields)


@router.get("", response_model=list[ExperienceResponse])
def list_experiences_endpoint(db: DatabaseDep) -> list[ExperienceResponse]:
    """List all experience entries, newest first."""
    return [ExperienceResponse(**r) for r in list_experiences(db)]


@router.post(
    "",
    response_model=CreatedResponse,
    responses={400: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(ExperienceCreateRequest, FILE_FIELD),
)
async def create_experience_endpoint(
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> CreatedResponse:
    """Create an experience entry with an optional company logo.

    ``description`` may be a JSON array or one bullet point per line.
    """
    values, logo = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(ExperienceCreateRequest, values)

    logo_ref = await store_upload(store, logo)
    try:
        created = create_experience(db, data.model_dump(exclude_unset=True), logo=logo_ref)
    except Exception:
        store.discard(logo_ref)
        raise

    logger.info("%s created experience %d", admin.username, created["id"])
    return CreatedResponse(id=created["id"], message="Experience added successfully")


@router.put(
    "/{experience_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(ExperienceUpdateRequest, FILE_FIELD),
)
async def update_experience_endpoint(
    experience_id: Annotated[int, Path(description="Experience entry ID")],
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    """Update an experience entry. Only submitted fields are changed.

    A new ``logo`` replaces the stored one; without it the logo is kept.
    """
    values, logo = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(ExperienceUpdateRequest, values)

    logo_ref = await store_upload(store, logo)
    try:
        result = update_experience(
            db, experience_id, data.model_dump(exclude_unset=True), logo=logo_ref
        )
    except Exception:
        store.discard(logo_ref)
        raise

    store.discard(result.replaced_file)
    logger.info("%s updated experience %d", admin.username, experience_id)
    return MessageResponse(message="Experience updated successfully")


@router.delete("/{experience_id}", response_model=MessageResponse, responses=AUTH_RESPONSES)
def delete_experience_endpoint(
    experience_id: Annotated[int, Path(description="Experience entry ID")],
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    """Delete an experience entry. Succeeds whether or not the id existed."""
    result = delete_experience(db, experience_id)
    if result.deleted:
        store.discard(result.file_ref)
        logger.info("%s deleted experience %d", admin.username, experience_id)
    return MessageResponse(message="Experience deleted successfully")
