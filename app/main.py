# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Masterclass API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run python scripts/start_api.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import settings
from app.exceptions import (
    MasterclassException,
    masterclass_exception_handler,
    unhandled_exception_handler,
)
from app.routers import health, users
from core.beans import catalog
from core.runners import run_startup_runners
from lib.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs on startup and shutdown:
    - Startup: configure logging, list beans, run post-construct hooks,
      then the startup runners
    - Shutdown: run pre-destroy hooks
    """
    configure_logging(settings)
    logger.info(f"Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode")

    for name in catalog.names():
        logger.info(name)
    logger.info(f"Number of beans: {catalog.count()}")

    service = catalog.get("some_service")
    service.init()

    # die() runs even when a runner fails after init()
    try:
        app.state.runner_report = run_startup_runners(catalog)
        yield
    finally:
        logger.info(f"Shutting down {settings.APP_NAME}")
        service.die()


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
## Framework Feature Walkthrough

A small API that shows dependency injection, provider lifecycle hooks,
declarative validation and error handling in FastAPI.

### Endpoints

| Method | Path | Behaviour |
|--------|------|-----------|
| GET | `/api/v1/user` | Always fails with a generic 500 |
| POST | `/api/v1/user` | Validates a user, 400 with violations on failure |
| GET | `/api/v1/health` | Health status |
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Users",
            "description": "User endpoints",
        },
        {
            "name": "Health",
            "description": "API health and liveness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(MasterclassException)
async def handle_masterclass_exception(request: Request, exc: MasterclassException):
    """Handle custom Masterclass exceptions."""
    return await masterclass_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions without exposing their message."""
    return await unhandled_exception_handler(request, exc)


# =============================================================================
# Routers
# =============================================================================

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# User endpoints
app.include_router(
    users.router,
    prefix="/api/v1/user",
    tags=["Users"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": settings.APP_NAME,
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
