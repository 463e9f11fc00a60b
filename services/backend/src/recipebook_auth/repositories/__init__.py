"""Abstract repository interfaces for recipebook_auth."""

from recipebook_auth.repositories.credential_directory import CredentialDirectory

__all__ = [
    "CredentialDirectory",
]
