"""SQLAlchemy implementation for recipebook_auth persistence.

Provides:
- AuthBase: Declarative base for credential models
- CredentialEntryModel: SQLAlchemy model for credential entries
- CredentialDirectorySQLAlchemy: CredentialDirectory implementation

The directory keeps its own metadata so it can live in a separate database
from the user records. Create its tables with AuthBase.metadata.create_all.
"""

from recipebook_auth.persistence.sqlalchemy.base import AuthBase
from recipebook_auth.persistence.sqlalchemy.models import CredentialEntryModel
from recipebook_auth.persistence.sqlalchemy.repositories import (
    CredentialDirectorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "CredentialDirectorySQLAlchemy",
    "CredentialEntryModel",
]
