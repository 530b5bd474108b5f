"""Education routes for the API."""

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
from portfolio_site.api.schemas.education import (
    EducationCreateRequest,
    EducationResponse,
    EducationUpdateRequest,
)
from portfolio_site.services.education import (
    create_education,
    delete_education,
    list_educations,
    update_education,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/education", tags=["education"])

FILE_FIELD = "logo"
_FIELDS = tuple(EducationCreateRequest.model_fields)


@router.get("", response_model=list[EducationResponse])
def list_educations_endpoint(db: DatabaseDep) -> list[EducationResponse]:
    """List all education entries, newest first."""
    return [EducationResponse(**r) for r in list_educations(db)]


@router.post(
    "",
    response_model=CreatedResponse,
    responses={400: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(EducationCreateRequest, FILE_FIELD),
)
async def create_education_endpoint(
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> CreatedResponse:
    """Create a new education entry."""
    values, logo = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(EducationCreateRequest, values)

    logo_ref = await store_upload(store, logo)
    try:
        result = create_education(db, data.model_dump(exclude_unset=True), logo=logo_ref)
    except Exception:
        store.discard(logo_ref)
        raise

    logger.info("%s created education %d", admin.username, result["id"])
    return CreatedResponse(id=result["id"], message="Education added successfully")


@router.put(
    "/{education_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(EducationUpdateRequest, FILE_FIELD),
)
async def update_education_endpoint(
    education_id: Annotated[int, Path(description="Education entry ID")],
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    """Update an existing education entry. Only provided fields are updated."""
    values, logo = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(EducationUpdateRequest, values)

    logo_ref = await store_upload(store, logo)
    try:
        result = update_education(
            db, education_id, data.model_dump(exclude_unset=True), logo=logo_ref
        )
    except Exception:
        store.discard(logo_ref)
        raise

    store.discard(result.replaced_file)
    logger.info("%s updated education %d", admin.username, education_id)
    return MessageResponse(message="Education updated successfully")


@router.delete("/{education_id}", response_model=MessageResponse, responses=AUTH_RESPONSES)
def delete_education_endpoint(
    education_id: Annotated[int, Path(description="Education entry ID")],
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    """Delete an education entry."""
    result = delete_education(db, education_id)
    if result.deleted:
        store.discard(result.file_ref)
        logger.info("%s deleted education %d", admin.username, education_id)
    return MessageResponse(message="Education deleted successfully")
