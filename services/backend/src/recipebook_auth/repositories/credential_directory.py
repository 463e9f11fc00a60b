"""Abstract interface for the credential directory.

The directory is the authoritative store of login credentials, keyed by
username. Implementations can use SQLAlchemy, LDAP, or any other storage.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from recipebook_auth.schemas import CredentialEntry, Role


class CredentialDirectory(ABC):
    """
    Abstract credential directory.

    Implementations must provide methods for:
    - Looking up an entry by username
    - Creating an entry bound to a role set
    - Replacing a password, authorised by the old one
    - Resetting a password (administrative repair)
    - Authenticating a username/password pair
    """

    @abstractmethod
    async def load_by_username(self, username: str) -> CredentialEntry:
        """
        Load the credential entry for a username.

        Parameters
        ----------
        username
            Login name to look up

        Returns
        -------
        The credential entry

        Raises
        ------
        CredentialNotFoundError
            If no entry exists for the username
        """

    @abstractmethod
    async def create(
        self,
        username: str,
        password: str,
        roles: Iterable[Role],
    ) -> CredentialEntry:
        """
        Create a credential entry.

        Parameters
        ----------
        username
            Login name, unique within the directory
        password
            Plaintext password, hashed before storage
        roles
            Roles granted to the username

        Returns
        -------
        The created credential entry

        Raises
        ------
        CredentialAlreadyExistsError
            If an entry already exists for the username
        """

    @abstractmethod
    async def change_password(
        self,
        username: str,
        old_password: str,
        new_password: str,
    ) -> None:
        """
        Replace a password, authorised by the current one.

        Raises
        ------
        CredentialNotFoundError
            If no entry exists for the username
        InvalidCredentialsError
            If old_password does not match the stored password
        """

    @abstractmethod
    async def reset_password(self, username: str, new_password: str) -> None:
        """
        Overwrite a password without the old one.

        Only used to repair entries that drifted from the user records.

        Raises
        ------
        CredentialNotFoundError
            If no entry exists for the username
        """

    @abstractmethod
    async def authenticate(self, username: str, password: str) -> CredentialEntry:
        """
        Check a username/password pair.

        Returns
        -------
        The matching credential entry

        Raises
        ------
        InvalidCredentialsError
            If the username is unknown or the password does not match
        """
