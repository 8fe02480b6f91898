"""Port for the external authentication provider."""

from abc import ABC, abstractmethod

from proflow.domain.entities import Identity


class IdentityStore(ABC):
    """Maps email addresses to authentication accounts.

    Implementations raise ``IdentityProviderError`` for provider failures;
    an unknown email is not a failure.
    """

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Identity | None:
        """Look up an account by email. Returns None if no account matches."""
        ...

    @abstractmethod
    async def delete_user(self, uid: str) -> None:
        """Delete an account. Raises EntityNotFoundError if it does not exist."""
        ...
