"""SQLAlchemy declarative base for recipebook_auth models.

This provides a separate Base for credential models. The consuming
application creates AuthBase tables next to (or apart from) its own:

Examples
--------
async with directory_engine.begin() as conn:
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for recipebook_auth models."""
