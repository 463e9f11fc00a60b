"""Credential directory exceptions.

These exceptions are raised by the recipebook_auth package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class CredentialNotFoundError(AuthError):
    """Raised when no credential entry exists for a username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"No credentials found for user: {username}")


class CredentialAlreadyExistsError(AuthError):
    """Raised when a credential entry already exists for a username."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Credentials already exist for user: {username}")


class InvalidCredentialsError(AuthError):
    """Raised when a username/password pair does not match."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)
