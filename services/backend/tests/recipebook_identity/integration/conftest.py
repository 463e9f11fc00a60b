"""
Pytest configuration for recipebook_identity integration tests.

Integration tests run the SQLAlchemy repositories against SQLite files.
Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
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
