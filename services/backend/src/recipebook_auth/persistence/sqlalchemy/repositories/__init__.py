"""SQLAlchemy repository implementations for recipebook_auth."""

from recipebook_auth.persistence.sqlalchemy.repositories.credential_directory import (
    CredentialDirectorySQLAlchemy,
)

__all__ = ["CredentialDirectorySQLAlchemy"]
