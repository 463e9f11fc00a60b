"""SQLAlchemy implementation of RecipeCatalog."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from recipebook.domain.recipe import RecipeCatalog
from recipebook.infrastructure.persistence.sqlalchemy.models import RecipeModel


class RecipeCatalogSQLAlchemy(RecipeCatalog):
    """Counts recipes straight from the recipes table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def count_for_user(self, user_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(RecipeModel)
            .where(RecipeModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()
