"""SQLAlchemy repository implementations."""

from recipebook.infrastructure.persistence.sqlalchemy.repositories.recipe_catalog import (  # noqa: E501
    RecipeCatalogSQLAlchemy,
)

__all__ = [
    "RecipeCatalogSQLAlchemy",
]
