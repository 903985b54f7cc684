"""ChangeLogger API — FastAPI application factory.

Invariants:
    - No module-level app or router: create_app builds a fresh application per call
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map failures → {"error": string} responses
    - CORS headers on every response, OPTIONS short-circuits with 204
    - Database pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Pool stored on app.state: dependencies reach it through the request, tests
      build apps without any pool
    - Startup ping fails soft: the process stays up and /health/ready reports 503
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from changelogger import __version__
from changelogger.api.cors import register_cors
from changelogger.api.error_handlers import register_error_handlers
from changelogger.api.routes.health import build_health_router
from changelogger.api.routes.projects import build_projects_router
from changelogger.config import Settings, get_settings
from changelogger.infrastructure.database import DatabaseSessionManager
from changelogger.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ChangeLogger application from settings."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_dsn,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            connect_timeout=settings.database_connect_timeout_seconds,
        )
        app.state.db_manager = db_manager
        if await db_manager.health_check():
            logger.info("Connection to the database is established")
        else:
            logger.error("Database unreachable at startup")
        logger.info("ChangeLogger API started")
        try:
            yield
        finally:
            logger.info("ChangeLogger API shutting down")
            await db_manager.close()
            app.state.db_manager = None

    app = FastAPI(
        title="ChangeLogger API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings

    register_cors(app, settings.cors_allow_origin)
    register_error_handlers(app)

    # Routes — explicit registration
    app.include_router(build_health_router())
    app.include_router(build_projects_router())

    return app
