# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Resets singleton beans between tests
# - Provides an HTTP client that runs the app lifespan
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "INFO")

import logging

import pytest
from fastapi.testclient import TestClient

from core.beans import catalog
from core.validation import BeanValidator


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_beans():
    """Every test starts with fresh singleton instances."""
    catalog.reset()
    yield
    catalog.reset()


@pytest.fixture
def restore_log_levels():
    """Undo level changes made by configure_logging()."""
    names = ["", "core", "core.services", "uvicorn.access"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def client():
    """
    Test client with the lifespan running.

    Unhandled server errors come back as 500 responses instead of being
    re-raised into the test.
    """
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def validator():
    return BeanValidator()


@pytest.fixture
def valid_user_dict():
    """A user that passes every constraint."""
    return {"name": "Nelson", "age": 30}
