"""SQLAlchemy declarative base for recipebook_identity models.

Uses the same metadata as recipebook's Base so recipes can reference users.
"""

from recipebook.infrastructure.persistence.sqlalchemy.models.base import Base

IdentityBase = Base
