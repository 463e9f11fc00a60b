"""SQLAlchemy models for recipebook_auth."""

from recipebook_auth.persistence.sqlalchemy.models.credential_entry_model import (
    CredentialEntryModel,
)

__all__ = [
    "CredentialEntryModel",
]
