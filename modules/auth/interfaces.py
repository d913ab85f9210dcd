"""
Authentication module interface.

Other modules and the API layer should depend on IAuthService, not the
concrete implementation. This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Account


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for account registration and signin.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, name: str, email: str, password: str) -> Account:
        """
        Register a new account.

        Args:
            name: Display name
            email: Email address (normalized before use)
            password: Plaintext password; only its hash is stored

        Returns:
            The created Account

        Raises:
            DuplicateEmailError: If the email is already registered
            HashingError: If hashing fails (nothing is persisted)
        """
        ...

    async def find_by_email(self, email: str) -> Optional[Account]:
        """
        Look up an account by email, case-insensitively.

        Returns:
            Account if found, None otherwise
        """
        ...

    async def get_account(self, account_id: str) -> Optional[Account]:
        """
        Look up an account by ID.

        Returns:
            Account if found, None otherwise
        """
        ...

    async def signin(self, email: str, password: str) -> str:
        """
        Check credentials and issue a bearer token.

        Returns:
            Signed bearer token for the account

        Raises:
            InvalidCredentialsError: If the email is unknown or the
                password is wrong (the two are indistinguishable)
        """
        ...
