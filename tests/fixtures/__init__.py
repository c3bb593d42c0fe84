"""
Test fixtures and utilities for the room service test suite.

- Unit tests: fast, isolated, mocked repositories or in-memory SQLite
- E2E tests: full API over ASGI with in-memory SQLite

Factories persist through an AsyncSession and return loaded entities.
"""

from .factories import RoomFactory, UserFactory, auth_headers_for
from .mocks import MockRepositories

__all__ = [
    "auth_headers_for",
    "UserFactory",
    "RoomFactory",
    "MockRepositories",
]
