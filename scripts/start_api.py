#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts the FastAPI application with uvicorn using the configured host/port.
#
# Usage:
#   # Start server (development)
#   poetry run python scripts/start_api.py
#
#   # Start with a settings profile (.env.dev on top of .env)
#   PROFILE=dev poetry run python scripts/start_api.py
#
#   # Or use uvicorn directly
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print(settings.APP_NAME)
    print("=" * 60)
    print()
    print(f"Listening on http://{settings.API_HOST}:{settings.API_PORT}")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.root_log_level <= logging.DEBUG else settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
