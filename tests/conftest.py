"""
Global test configuration and fixtures.

This module contains only global fixtures that are shared across all test types.
Test-specific fixtures are located in their respective conftest.py files:
- tests/unit/conftest.py - Unit test fixtures with SQLite + mocks
- tests/e2e/conftest.py - E2E test fixtures with SQLite + FastAPI
"""

import os

# Settings are read at import time, so the environment must be ready first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402


# Global sample data fixtures (no database dependencies)
@pytest.fixture
def sample_user_data():
    """Standard user registration data for API testing."""
    return {
        "email": "user@example.com",
        "username": "testuser",
        "password": "password123",
    }


@pytest.fixture
def sample_room_data():
    """Standard room creation data for API testing."""
    start = datetime.now(timezone.utc) + timedelta(hours=1)
    return {
        "name": "Test Room",
        "description": "A test room for testing purposes",
        "start_date": start.isoformat(),
        "end_date": (start + timedelta(hours=4)).isoformat(),
        "interests": {"music": ["Jazz", "rock"], "food": ["coffee"]},
    }


# Pytest configuration
def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on their location."""
    for item in items:
        path = str(item.fspath)
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)
        elif f"{os.sep}e2e{os.sep}" in path:
            item.add_marker(pytest.mark.e2e)
