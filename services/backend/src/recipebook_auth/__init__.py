"""Recipe Book Auth - credential directory for login.

This package owns the authoritative login credentials, independent of the
recipe book's user records. It handles:
- Password hashing (bcrypt)
- Credential entries keyed by username, bound to a role set
- Credential storage (with pluggable persistence)

Architecture:
    recipebook_auth/
    ├── services/           # Pure logic (password hashing)
    ├── repositories/       # Abstract CredentialDirectory interface
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from recipebook_auth import CredentialDirectory, PasswordHashingService
    from recipebook_auth.persistence.sqlalchemy import (
        AuthBase,
        CredentialDirectorySQLAlchemy,
    )
"""

from recipebook_auth.exceptions import (
    AuthError,
    CredentialAlreadyExistsError,
    CredentialNotFoundError,
    InvalidCredentialsError,
)
from recipebook_auth.repositories import CredentialDirectory
from recipebook_auth.schemas import CredentialEntry, Role
from recipebook_auth.services import PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    # Repositories (interfaces)
    "CredentialDirectory",
    # Schemas
    "CredentialEntry",
    "Role",
    # Exceptions
    "AuthError",
    "CredentialAlreadyExistsError",
    "CredentialNotFoundError",
    "InvalidCredentialsError",
]
