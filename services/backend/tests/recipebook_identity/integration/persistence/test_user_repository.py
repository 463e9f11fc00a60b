"""Tests for UserRepositorySQLAlchemy against SQLite."""

import pytest

from recipebook_identity.domain.user import User, UsernameTakenError, UserNotFoundError
from recipebook_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)


class TestUserRepositoryCreate:
    async def test_create_assigns_sequential_ids(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        alice = await repo.create(User.create("alice", "alice@example.com", "pw1"))
        bob = await repo.create(User.create("bob", "bob@example.com", "pw1"))

        assert alice.id == 1
        assert bob.id == 2
        assert alice.is_persisted

    async def test_create_duplicate_name_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(User.create("alice", "alice@example.com", "pw1"))

        with pytest.raises(UsernameTakenError):
            await repo.create(User.create("alice", "other@example.com", "pw9"))

        # Session is usable after the rollback
        assert (await repo.find_by_name("alice")).email == "alice@example.com"

    async def test_create_persisted_user_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        alice = await repo.create(User.create("alice", "alice@example.com", "pw1"))

        with pytest.raises(ValueError):
            await repo.create(alice)


class TestUserRepositoryFind:
    async def test_find_by_id_and_name(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        created = await repo.create(User.create("alice", "alice@example.com", "pw1"))

        by_id = await repo.find_by_id(created.id)
        by_name = await repo.find_by_name("alice")

        assert by_id == created
        assert by_name == created
        assert by_id.password == "pw1"
        assert by_id.created_at.tzinfo is not None

    async def test_find_missing_returns_none(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        assert await repo.find_by_id(99) is None
        assert await repo.find_by_name("nobody") is None


class TestUserRepositorySave:
    async def test_save_updates_password(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        alice = await repo.create(User.create("alice", "alice@example.com", "pw1"))

        alice.change_password("pw2")
        await repo.save(alice)

        assert (await repo.find_by_id(alice.id)).password == "pw2"

    async def test_save_unstored_user_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)

        with pytest.raises(ValueError):
            await repo.save(User.create("alice", "alice@example.com", "pw1"))

    async def test_save_deleted_user_raises(self, db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        ghost = User.reconstitute(
            id=5,
            name="ghost",
            email="ghost@example.com",
            password="pw1",
            created_at=User.create("x", "x", "x").created_at,
            updated_at=User.create("x", "x", "x").updated_at,
        )

        with pytest.raises(UserNotFoundError):
            await repo.save(ghost)
