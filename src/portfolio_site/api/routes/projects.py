"""Project routes for the API."""

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
from portfolio_site.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from portfolio_site.services.projects import (
    create_project,
    delete_project,
    list_projects,
    update_project,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])

FILE_FIELD = "image"
_FIELDS = tuple(ProjectCreateRequest.model_fields)


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
    description="Return every project, newest first.",
)
def list_projects_endpoint(db: DatabaseDep) -> list[ProjectResponse]:
    return [ProjectResponse(**p) for p in list_projects(db)]


@router.post(
    "",
    response_model=CreatedResponse,
    summary="Create a project",
    description="Create a project from multipart fields with an optional image.",
    responses={400: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(ProjectCreateRequest, FILE_FIELD),
)
async def create_project_endpoint(
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> CreatedResponse:
    values, image = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(ProjectCreateRequest, values)

    image_ref = await store_upload(store, image)
    try:
        project = create_project(db, data.model_dump(exclude_unset=True), image=image_ref)
    except Exception:
        store.discard(image_ref)
        raise

    logger.info("%s created project %d", admin.username, project["id"])
    return CreatedResponse(id=project["id"], message="Project added successfully")


@router.put(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Update a project",
    description="Overwrite the submitted fields; a new image replaces the stored one.",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, **AUTH_RESPONSES},
    openapi_extra=multipart_body(ProjectUpdateRequest, FILE_FIELD),
)
async def update_project_endpoint(
    project_id: Annotated[int, Path(description="Project ID")],
    request: Request,
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    values, image = await read_submission(request, _FIELDS, FILE_FIELD)
    data = parse_form(ProjectUpdateRequest, values)

    image_ref = await store_upload(store, image)
    try:
        result = update_project(
            db, project_id, data.model_dump(exclude_unset=True), image=image_ref
        )
    except Exception:
        store.discard(image_ref)
        raise

    store.discard(result.replaced_file)
    logger.info("%s updated project %d", admin.username, project_id)
    return MessageResponse(message="Project updated successfully")


@router.delete(
    "/{project_id}",
    response_model=MessageResponse,
    summary="Delete a project",
    description="Remove a project and its stored image. Missing ids are not an error.",
    responses=AUTH_RESPONSES,
)
def delete_project_endpoint(
    project_id: Annotated[int, Path(description="Project ID")],
    admin: AdminDep,
    db: DatabaseDep,
    store: FileStoreDep,
) -> MessageResponse:
    result = delete_project(db, project_id)
    if result.deleted:
        store.discard(result.file_ref)
        logger.info("%s deleted project %d", admin.username, project_id)
    return MessageResponse(message="Project deleted successfully")
