"""Shared pytest fixtures for all test domains."""

from tests.shared.fixtures.database import (
    databases,
    db_session,
    directory_session,
    password_service,
)

__all__ = [
    "databases",
    "db_session",
    "directory_session",
    "password_service",
]
