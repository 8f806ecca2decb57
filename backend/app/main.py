"""
FastAPI application entry point.

Uses structured logging from core.logging module.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.db import DatabaseManager
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import issues as issues_router

# Configure structured logging
settings = get_settings()
log_level = "DEBUG" if settings.debug else "INFO"
configure_logging(level=log_level)
logger = get_logger("api")


def check_database_health(
    database: DatabaseManager, max_retries: int = 3, retry_delay: float = 2.0
) -> bool:
    """
    Check database connectivity with retry logic.

    Args:
        database: Initialized database manager
        max_retries: Maximum number of connection attempts
        retry_delay: Seconds to wait between retries

    Returns:
        True if database is reachable

    Raises:
        RuntimeError: If database is unreachable after all retries
    """
    for attempt in range(max_retries):
        result = database.health_check()
        if result["healthy"]:
            logger.info("database_health_check_passed", attempt=attempt + 1)
            return True
        logger.warning(
            "database_health_check_failed",
            attempt=attempt + 1,
            max_retries=max_retries,
            error=result["error"],
        )
        if attempt < max_retries - 1:
            time.sleep(retry_delay * (attempt + 1))

    raise RuntimeError(
        f"Database unreachable after {max_retries} attempts. "
        "Check DATABASE_URL configuration and database server status."
    )


def create_app(database: DatabaseManager | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        database: Database manager to serve requests from. When omitted, one is
            created from settings at startup and disposed at shutdown.
    """
    owns_database = database is None
    database = database or DatabaseManager()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("app_startup", app_name=settings.app_name)

        database.initialize(settings.database_url)
        if settings.db_create_tables:
            database.create_all_tables()
        logger.info("database_initialized")

        check_database_health(database)
        try:
            yield
        finally:
            logger.info("app_shutdown")
            if owns_database:
                database.reset()

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
    app.state.db = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        # Only allow methods actually used by the API
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Structured request logging; the request ID middleware wraps it so the
    # caller's id is bound before the first log line
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check endpoint.

        Returns 200 if the database answers, 503 if not.
        """
        checks = {"database": database.health_check()["healthy"]}
        if not checks["database"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": checks},
            )
        return {"status": "ready", "checks": checks}

    # Issues live at /api/issues/{projectname}
    app.include_router(issues_router.router, prefix=settings.api_prefix)

    return app


app = create_app()
