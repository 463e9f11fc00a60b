"""Unit tests for the User aggregate."""

from recipebook_identity.domain.user import User


class TestUserCreate:
    def test_create_is_not_persisted(self):
        user = User.create("alice", "alice@example.com", "pw1")

        assert user.id is None
        assert not user.is_persisted
        assert user.name == "alice"
        assert user.email == "alice@example.com"
        assert user.password == "pw1"
        assert user.created_at.tzinfo is not None

    def test_reconstitute_keeps_id(self, alice):
        assert alice.id == 1
        assert alice.is_persisted


class TestUserChangePassword:
    def test_change_password_replaces_value(self, alice):
        before = alice.updated_at

        alice.change_password("pw2")

        assert alice.password == "pw2"
        assert alice.updated_at >= before

    def test_change_password_keeps_identity(self, alice):
        alice.change_password("pw2")

        assert alice.id == 1
        assert alice.name == "alice"


class TestUserEquality:
    def test_stored_users_compare_by_fields(self, alice):
        twin = User.reconstitute(
            id=alice.id,
            name=alice.name,
            email=alice.email,
            password=alice.password,
            created_at=alice.created_at,
            updated_at=alice.updated_at,
        )

        assert twin == alice
        assert hash(twin) == hash(alice)

    def test_password_difference_breaks_equality(self, alice, bob):
        twin = User.reconstitute(
            id=alice.id,
            name=alice.name,
            email=alice.email,
            password="other",
            created_at=alice.created_at,
            updated_at=alice.updated_at,
        )

        assert twin != alice
        assert alice != bob

    def test_unstored_users_compare_by_identity(self):
        first = User.create("alice", "alice@example.com", "pw1")
        second = User.create("alice", "alice@example.com", "pw1")

        assert first == first
        assert first != second

    def test_repr_hides_password(self, alice):
        assert "pw1" not in repr(alice)
