"""Recipe catalog interface."""

from abc import ABC, abstractmethod


class RecipeCatalog(ABC):
    """Read-only access to recipes, as far as user profiles need it."""

    @abstractmethod
    async def count_for_user(self, user_id: int) -> int:
        """Count the recipes owned by a user."""
