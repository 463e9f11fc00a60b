"""SQLAlchemy model for recipes."""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recipebook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class RecipeModel(Base, TimestampMixin):
    """Recipe rows owned by a user.

    Only the columns the account pages read are mapped here.
    """

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    instructions: Mapped[str] = mapped_column(Text, default="", nullable=False)

    def __repr__(self) -> str:
        return f"<RecipeModel(id={self.id}, user_id={self.user_id}, title={self.title})>"
