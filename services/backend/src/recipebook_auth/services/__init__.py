"""Credential services - password hashing."""

from recipebook_auth.services.password_service import PasswordHashingService

__all__ = [
    "PasswordHashingService",
]
