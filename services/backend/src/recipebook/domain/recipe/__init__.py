"""Recipe domain, reduced to what the account pages need."""

from recipebook.domain.recipe.recipe_catalog import RecipeCatalog

__all__ = [
    "RecipeCatalog",
]
