"""SQLAlchemy models for persistence layer."""

from recipebook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from recipebook.infrastructure.persistence.sqlalchemy.models.recipe_model import (
    RecipeModel,
)

__all__ = [
    "Base",
    "RecipeModel",
    "TimestampMixin",
]
