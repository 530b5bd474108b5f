"""Shared dependencies for API routes.

The application factory stores the configured ``Settings``, ``Database``
and ``FileStore`` on ``app.state``; routes receive them through these
dependencies rather than importing globals.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any

from fastapi import Depends, Header, Request
from starlette.datastructures import UploadFile

from portfolio_site.config import Settings
from portfolio_site.data.db import Database
from portfolio_site.services.auth import Identity, authenticate
from portfolio_site.services.file_store import FileStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_file_store(request: Request) -> FileStore:
    return request.app.state.file_store


def require_admin(
    settings: Annotated[Settings, Depends(get_settings)],
    authorization: Annotated[
        str | None,
        Header(description="Session token issued by /api/auth/login, as 'Bearer <token>'."),
    ] = None,
) -> Identity:
    """Authenticate the bearer token of a mutating request.

    Raises:
        Unauthorized: If no token is supplied (HTTP 401).
        Forbidden: If the token is invalid or expired (HTTP 403).
    """
    return authenticate(settings, authorization)


SettingsDep = Annotated[Settings, Depends(get_settings)]
DatabaseDep = Annotated[Database, Depends(get_db)]
FileStoreDep = Annotated[FileStore, Depends(get_file_store)]
AdminDep = Annotated[Identity, Depends(require_admin)]


async def read_submission(
    request: Request, fields: Iterable[str], file_field: str
) -> tuple[dict[str, Any], UploadFile | None]:
    """Collect the text fields and optional file of a create/update request.

    Multipart and urlencoded bodies are read as submitted, so an empty
    string stays distinguishable from an omitted field. A JSON object body
    is accepted as well (without a file).
    """
    values: dict[str, Any] = {}
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            values = {name: payload[name] for name in fields if name in payload}
        return values, None

    form = await request.form()
    for name in fields:
        value = form.get(name)
        if isinstance(value, str):
            values[name] = value
    upload = form.get(file_field)
    return values, upload if isinstance(upload, UploadFile) else None


async def store_upload(store: FileStore, upload: UploadFile | None) -> str | None:
    """Persist an optional uploaded file and return its reference.

    A file input submitted without a selection arrives with an empty
    filename and is treated as absent.
    """
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return store.store(content, upload.filename)
