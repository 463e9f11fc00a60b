# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from recipebook_identity.infrastructure.persistence.sqlalchemy.models.identity_intent_model import (
    IdentityIntentModel,
)
from recipebook_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "IdentityIntentModel",
    "UserModel",
]
