"""Contacts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactsAPIError → structured JSON responses
    - CORS, docs and OpenAPI metadata configured from settings (not hardcoded)
    - Database manager created on startup, stored on app.state.db, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory so tests and scripts can build an app from their own Settings
    - OpenAPI schema + /docs UI come from FastAPI itself; DOCS_ENABLED=false turns both off
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.routes import contacts, health
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_tables()
    app.state.db = db_manager
    logger.info(f"Contacts API started, listening on port {settings.port}")
    try:
        yield
    finally:
        logger.info("Contacts API shutting down")
        await db_manager.close()
        app.state.db = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=API_VERSION,
        contact={"name": settings.api_contact_name},
        servers=settings.api_servers,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes registered explicitly
    app.include_router(health.router)
    app.include_router(contacts.router)

    register_error_handlers(app)

    # Static files mounted AFTER API routes so /api/* and /docs take precedence
    if os.path.isdir(settings.static_dir):
        app.mount(
            "/", StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
