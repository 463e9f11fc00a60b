"""SQLAlchemy persistence for the recipe book application."""

from recipebook.infrastructure.persistence.sqlalchemy.models import Base, RecipeModel
from recipebook.infrastructure.persistence.sqlalchemy.repositories import (
    RecipeCatalogSQLAlchemy,
)

__all__ = [
    "Base",
    "RecipeCatalogSQLAlchemy",
    "RecipeModel",
]
