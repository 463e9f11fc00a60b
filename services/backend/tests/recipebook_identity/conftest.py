"""
Pytest configuration for recipebook_identity tests.

This conftest provides fixtures specific to the identity domain
(users, intents, outcomes).
"""

from datetime import datetime, timezone

import pytest

from recipebook_identity.domain.user import User

CREATED_AT = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def alice() -> User:
    """A stored user as the repository would return it."""
    return User.reconstitute(
        id=1,
        name="alice",
        email="alice@example.com",
        password="pw1",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )


@pytest.fixture
def bob() -> User:
    return User.reconstitute(
        id=2,
        name="bob",
        email="bob@example.com",
        password="hunter22",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
    )
