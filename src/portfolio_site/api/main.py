"""FastAPI application factory for the portfolio site."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from portfolio_site.api.routes import auth, education, experience, health, pages, projects
from portfolio_site.config import Settings
from portfolio_site.data.db import Database
from portfolio_site.logging_config import configure_logging
from portfolio_site.services.auth import Forbidden, InvalidCredentials, Unauthorized, ensure_admin
from portfolio_site.services.exceptions import NotFoundError, ValidationError
from portfolio_site.services.file_store import FileStore
from portfolio_site.services.seed import seed_demo_content
from portfolio_site.web import STATIC_DIR

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


def startup(settings: Settings, db: Database, file_store: FileStore) -> None:
    """Create tables, the upload directory and the admin credential."""
    db.init()
    file_store.ensure_root()
    ensure_admin(db, settings.admin_username, settings.admin_password)
    if settings.seed_demo_content:
        seed_demo_content(db)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidCredentials)
    async def _invalid_credentials(request: Request, exc: InvalidCredentials) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED, content={"error": "Invalid credentials"}
        )

    @app.exception_handler(Unauthorized)
    async def _unauthorized(request: Request, exc: Unauthorized) -> Response:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    @app.exception_handler(Forbidden)
    async def _forbidden(request: Request, exc: Forbidden) -> Response:
        return Response(status_code=status.HTTP_403_FORBIDDEN)

    @app.exception_handler(ValidationError)
    async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc), "field": exc.field},
        )

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings (read from the environment if omitted)."""
    if settings is None:
        settings = Settings.from_env()
        # Started by the uvicorn factory, possibly in a reload worker.
        configure_logging(settings.log_level)
    db = Database(settings.database_url)
    file_store = FileStore(settings.upload_dir, settings.upload_url_prefix)
    # Static mounts need the upload directory to exist before the first request.
    file_store.ensure_root()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize resources on startup and clean up on shutdown."""
        startup(settings, db, file_store)
        yield
        db.dispose()

    app = FastAPI(
        title="Portfolio API",
        description="Public portfolio content and the admin API that edits it",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db
    app.state.file_store = file_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router, prefix="/api")
    app.include_router(experience.router, prefix="/api")
    app.include_router(education.router, prefix="/api")
    app.include_router(projects.router, prefix="/api")
    app.include_router(pages.router)

    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=str(file_store.root)),
        name="uploads",
    )
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    return app
