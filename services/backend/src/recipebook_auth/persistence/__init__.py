"""Persistence implementations for recipebook_auth.

This package contains database-specific implementations of the
CredentialDirectory interface defined in recipebook_auth.repositories.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation
"""
