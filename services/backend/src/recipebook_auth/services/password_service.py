"""Password hashing service using bcrypt."""

import bcrypt


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Beyond bcrypt's own 72-byte limit, length rules are enforced where
    requests are validated.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # bcrypt only looks at the first 72 bytes and newer releases reject more
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
            Higher values are more secure but slower.
        """
        self._rounds = rounds

    @classmethod
    def validate(cls, password: str) -> bytes:
        """Check that bcrypt can hash a password.

        Returns
        -------
        The UTF-8 encoded password

        Raises
        ------
        ValueError
            If the password is empty or longer than 72 bytes
        """
        encoded = password.encode("utf-8")
        if not encoded:
            msg = "Password cannot be empty"
            raise ValueError(msg)
        if len(encoded) > cls.MAX_BYTES:
            msg = f"Password cannot exceed {cls.MAX_BYTES} bytes"
            raise ValueError(msg)
        return encoded

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        ValueError
            If the password is empty or longer than 72 bytes
        """
        encoded = self.validate(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or oversized password
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was made with a different work factor."""
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                current_rounds = int(parts[2])
                return current_rounds != self._rounds
        except (ValueError, IndexError):
            pass
        return True
