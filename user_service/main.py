"""
User Service - Main Application
===============================

HTTP service exposing user records stored in PostgreSQL.

Startup sequence (see ``lifespan``):
1. Setup structured logging
2. Create the shared ``Database``
3. Check connectivity (logged, never fatal)
4. Optionally create tables
5. Seed the admin account (logged, never fatal)

Run with ``python -m user_service``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from user_service.config import Settings, get_settings
from user_service.core import RepositoryException
from user_service.infrastructure.database import Database
from user_service.shared.api import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    global_exception_handler,
    repository_exception_handler,
)
from user_service.shared.infrastructure.logging import get_logger, setup_logging
from user_service.users.application import AdminSeeder, GreetingResponse, HealthResponse
from user_service.users.infrastructure import bootstrap_admin
from user_service.users.interfaces import users_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP: logging, database, connectivity check, admin seeding.
    SHUTDOWN: close database connections.
    """
    settings: Settings = app.state.settings

    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting User Service", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    database = Database.from_settings(settings)
    app.state.database = database

    # If the database is not reachable the server still starts;
    # database-backed endpoints will fail until it is.
    try:
        await database.ping()
        logger.info("Connected to database")
    except Exception as e:
        logger.error("Error connecting to database", extra={"error": str(e)})

    if settings.db_create_tables:
        try:
            await database.create_tables()
        except Exception as e:
            logger.warning(f"Could not create tables: {e}")

    if settings.seed_admin:
        outcome = await bootstrap_admin(database, AdminSeeder.from_settings(settings))
        logger.info("Admin seeding finished", extra={"outcome": outcome.value})

    logger.info("User Service started", extra={"port": settings.port})

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down User Service")
    await database.close()
    logger.info("User Service shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; read from the environment when omitted
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="User Service API",
        description="Lookup endpoints for user records stored in PostgreSQL.",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings

    # === Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    app.add_exception_handler(RepositoryException, repository_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    # === Routes ===
    app.include_router(users_router)

    @app.get("/", tags=["Root"], response_model=GreetingResponse)
    async def root():
        """Static greeting."""
        return GreetingResponse(message="Hello World!")

    @app.get("/health", tags=["Health"], response_model=HealthResponse)
    async def health_check(request: Request):
        """
        Health check endpoint for load balancers and orchestrators.

        Always answers 200; ``status`` is ``degraded`` when the database
        cannot be reached.
        """
        database: Optional[Database] = getattr(request.app.state, "database", None)
        checks = {"database": "not_initialized"}

        if database is not None:
            try:
                await database.ping()
                checks["database"] = "connected"
            except Exception as e:
                checks["database"] = f"error: {e}"

        return HealthResponse(
            status="healthy" if checks["database"] == "connected" else "degraded",
            version=settings.app_version,
            environment=settings.environment,
            checks=checks,
        )

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "user_service.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    run()
