"""SQLAlchemy implementation for recipebook_identity persistence.

Provides:
- IdentityBase: Declarative base for identity models
- UserModel: SQLAlchemy model for users
- IdentityIntentModel: SQLAlchemy model for identity intents
- UserRepositorySQLAlchemy: Repository implementation for users
- IntentRepositorySQLAlchemy: Repository implementation for intents
"""

from recipebook_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from recipebook_identity.infrastructure.persistence.sqlalchemy.models import (
    IdentityIntentModel,
    UserModel,
)
from recipebook_identity.infrastructure.persistence.sqlalchemy.repositories import (
    IntentRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "IdentityIntentModel",
    "IntentRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
