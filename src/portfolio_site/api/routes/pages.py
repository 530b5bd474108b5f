"""HTML routes: the public portfolio page and the admin dashboard views.

The admin pages are plain shells; the browser keeps the session token in
``localStorage`` and every mutation goes through the JSON API.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio_site.api.dependencies import DatabaseDep, FileStoreDep, SettingsDep
from portfolio_site.config import Settings
from portfolio_site.services.education import list_educations
from portfolio_site.services.experience import list_experiences
from portfolio_site.services.file_store import FileStore
from portfolio_site.services.projects import list_projects
from portfolio_site.web import TEMPLATES_DIR
from portfolio_site.web.forms import RESOURCE_FORMS, record_to_form_values, table_cell
from portfolio_site.web.profile import BRAND_STRIP_SIZE, DEFAULT_PROFILE

router = APIRouter(include_in_schema=False)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_LISTERS = {
    "experience": list_experiences,
    "education": list_educations,
    "projects": list_projects,
}


def _base_context(settings: Settings, store: FileStore) -> dict[str, Any]:
    origin = settings.api_origin

    def asset_url(reference: str | None) -> str | None:
        return store.resolve(reference, origin)

    return {
        "api_base": f"{origin}/api",
        "asset_url": asset_url,
        "profile": DEFAULT_PROFILE,
    }


@router.get("/", response_class=HTMLResponse)
def home(
    request: Request, db: DatabaseDep, settings: SettingsDep, store: FileStoreDep
) -> HTMLResponse:
    """Render the public single page."""
    experiences = list_experiences(db)
    context = {
        **_base_context(settings, store),
        "experiences": experiences,
        "brands": experiences[:BRAND_STRIP_SIZE],
        "educations": list_educations(db),
        "projects": list_projects(db),
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/admin", response_class=HTMLResponse)
def admin_login(request: Request, settings: SettingsDep, store: FileStoreDep) -> HTMLResponse:
    context = _base_context(settings, store)
    return templates.TemplateResponse(request, "admin/login.html", context)


@router.get("/admin/dashboard", response_class=HTMLResponse)
def admin_dashboard(
    request: Request, settings: SettingsDep, store: FileStoreDep
) -> HTMLResponse:
    context = {
        **_base_context(settings, store),
        "forms": list(RESOURCE_FORMS.values()),
        "active": None,
    }
    return templates.TemplateResponse(request, "admin/dashboard.html", context)


@router.get("/admin/dashboard/{kind}", response_class=HTMLResponse)
def admin_manager(
    request: Request,
    kind: Annotated[str, Path(description="Resource kind")],
    db: DatabaseDep,
    settings: SettingsDep,
    store: FileStoreDep,
) -> HTMLResponse:
    """Render the manager table and modal form for one resource kind."""
    form = RESOURCE_FORMS.get(kind)
    if form is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown section")

    records = _LISTERS[kind](db)
    rows = [
        {
            "id": record["id"],
            "thumbnail": store.resolve(record.get(form.file_field), settings.api_origin),
            "cells": [table_cell(form, record, column) for column, _ in form.columns],
            "values": record_to_form_values(form, record),
        }
        for record in records
    ]
    context = {
        **_base_context(settings, store),
        "forms": list(RESOURCE_FORMS.values()),
        "form": form,
        "rows": rows,
        "active": kind,
    }
    return templates.TemplateResponse(request, "admin/manager.html", context)
