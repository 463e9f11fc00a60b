"""User aggregate."""

from datetime import datetime

from recipebook.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    The id is assigned by the user record store on creation and never
    changes afterwards. The password is the value the store knows; the
    credential directory keeps its own hashed copy.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._name = name
        self._email = email
        self._password = password
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password(self) -> str:
        return self._password

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_password(self, new_password: str) -> None:
        self._password = new_password
        self._updated_at = utc_now()

    @classmethod
    def create(cls, name: str, email: str, password: str) -> "User":
        return cls(name=name, email=email, password=password)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        name: str,
        email: str,
        password: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password=password,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return (
            self._id == other._id
            and self._name == other._name
            and self._email == other._email
            and self._password == other._password
        )

    def __hash__(self) -> int:
        return hash((self._id, self._name))

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name}, email={self._email})"
