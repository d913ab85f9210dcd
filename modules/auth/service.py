"""
Authentication service implementation.

Composes the account repository, password hasher and token service into
the signup and signin flows.
"""

import asyncio
import logging
from typing import Optional

from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import Account, normalize_email
from .passwords import PasswordHasher
from .repository import AccountRepository
from .tokens import TokenService
from .exceptions import DuplicateEmailError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Accounts live in Supabase; passwords are stored as bcrypt hashes
    and signin hands out HS256 bearer tokens.
    """

    def __init__(
        self,
        repository: AccountRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._repository = repository
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, name: str, email: str, password: str) -> Account:
        """
        Register a new account.

        The duplicate check runs before hashing so a taken email costs no
        bcrypt work. Two racing signups can both pass it; the repository
        then maps the unique-constraint failure to DuplicateEmailError.
        """
        email = normalize_email(email)

        if await self.find_by_email(email) is not None:
            raise DuplicateEmailError()

        password_hash = await self._hasher.hash(password)
        account = await asyncio.to_thread(
            self._repository.create, name.strip(), email, password_hash
        )

        logger.info(f"Registered account {account.id}")
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        return await asyncio.to_thread(self._repository.get_by_email, normalize_email(email))

    async def get_account(self, account_id: str) -> Optional[Account]:
        return await asyncio.to_thread(self._repository.get_by_id, account_id)

    async def signin(self, email: str, password: str) -> str:
        """
        Check credentials and issue a bearer token.

        An unknown email still pays for one password verification so the
        response time does not reveal whether the account exists.
        """
        account = await self.find_by_email(email)

        if account is None:
            await self._hasher.dummy_verify(password)
            logger.info("Sign-in rejected")
            raise InvalidCredentialsError()

        if not await self._hasher.verify(password, account.password_hash):
            logger.info("Sign-in rejected")
            raise InvalidCredentialsError()

        return self._tokens.issue(AuthenticatedUser(id=account.id, email=account.email))
