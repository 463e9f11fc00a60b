"""Profile assembly for the user pages."""

import logging
from collections.abc import Awaitable, Callable

from recipebook.domain.recipe import RecipeCatalog
from recipebook_identity.application.context import UserContext
from recipebook_identity.domain.user import User, UserRepository
from recipebook_identity.outcomes import FailureKind, Outcome
from recipebook_identity.schemas import ProfileView, UserProjection

logger = logging.getLogger(__name__)


class ProfileService:
    """Builds profile views; never raises to the caller.

    A missing user or a failing collaborator turns into a failed outcome
    whose message names the lookup key.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        recipe_catalog: RecipeCatalog,
    ):
        self._user_repo = user_repository
        self._recipes = recipe_catalog

    async def by_name(
        self,
        name: str,
        include_recipe_count: bool = False,
    ) -> Outcome[ProfileView]:
        return await self._assemble(
            lambda: self._user_repo.find_by_name(name),
            key=f"name: {name}",
            include_recipe_count=include_recipe_count,
        )

    async def by_id(
        self,
        user_id: int,
        include_recipe_count: bool = False,
    ) -> Outcome[ProfileView]:
        return await self._assemble(
            lambda: self._user_repo.find_by_id(user_id),
            key=f"id: {user_id}",
            include_recipe_count=include_recipe_count,
        )

    async def for_principal(self, context: UserContext) -> Outcome[ProfileView]:
        """Profile of the authenticated caller, with their recipe count."""
        return await self._assemble(
            lambda: self._user_repo.find_by_name(context.username),
            key=f"user: {context.username}",
            include_recipe_count=True,
        )

    async def _assemble(
        self,
        lookup: Callable[[], Awaitable[User | None]],
        key: str,
        include_recipe_count: bool,
    ) -> Outcome[ProfileView]:
        try:
            user = await lookup()
            if user is None:
                logger.warning("No user found for %s", key)
                return Outcome.fail(FailureKind.NOT_FOUND, f"User not found for {key}")

            projection = UserProjection.from_user(user)
            recipe_count = None
            if include_recipe_count:
                recipe_count = await self._recipes.count_for_user(projection.id)
        except Exception:
            logger.exception("Unable to assemble profile for %s", key)
            return Outcome.fail(FailureKind.UNKNOWN, f"Unable to load user for {key}")

        return Outcome.ok(ProfileView(user=projection, recipe_count=recipe_count))
