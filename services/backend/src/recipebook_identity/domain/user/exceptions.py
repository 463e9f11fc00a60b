"""User domain exceptions."""


class UsernameTakenError(Exception):
    """User name already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"User name already registered: {name}")


class UserNotFoundError(Exception):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class CredentialMismatchError(Exception):
    """Directory entry exists but does not match the user record."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Credentials for {name} do not match the user record")
