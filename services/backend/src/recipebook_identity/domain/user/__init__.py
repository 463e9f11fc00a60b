"""User domain manages the recipe book's own user records.

This domain handles:
- User aggregate (identity: id, name, email, password)
- The UserRepository contract (the user record store)

Login credentials are owned by recipebook_auth, keyed by the same name.
"""

from recipebook_identity.domain.user.aggregates import User
from recipebook_identity.domain.user.exceptions import (
    CredentialMismatchError,
    UsernameTakenError,
    UserNotFoundError,
)
from recipebook_identity.domain.user.repositories import UserRepository

__all__ = [
    "CredentialMismatchError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UsernameTakenError",
]
