"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from recipebook_identity.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates (the user record store)."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[User]:
        """Find a user by their name."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with its assigned ID.

        Raises UsernameTakenError when the name is already stored.
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user."""
