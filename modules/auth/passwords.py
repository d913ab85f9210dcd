"""
Password hashing.

bcrypt with a configurable work factor. Hashing is CPU bound and slow on
purpose, so the async API runs it in a worker thread to keep the event
loop responsive.
"""

import asyncio
import logging

import bcrypt

from .exceptions import HashingError
from .models import MAX_PASSWORD_BYTES

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


class PasswordHasher:
    """
    One-way, salted password hashing.

    hash() produces a new salt on every call, so hashing the same password
    twice yields different secrets, and verify() accepts both.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds
        # Secret for dummy_verify, so it costs exactly one checkpw
        self._dummy_hash = bcrypt.hashpw(b"dummy-password-0", bcrypt.gensalt(rounds=rounds))

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash_sync(self, password: str) -> str:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise HashingError()
        try:
            return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")
        except (ValueError, TypeError) as e:
            logger.error(f"bcrypt hash failed: {type(e).__name__}")
            raise HashingError() from None

    def verify_sync(self, password: str, password_hash: str) -> bool:
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            # Could never have been stored, see SignupRequest
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except (ValueError, TypeError) as e:
            logger.error(f"bcrypt verify failed: {type(e).__name__}")
            raise HashingError() from None

    async def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            HashingError: If bcrypt fails; the plaintext is never included.
        """
        return await asyncio.to_thread(self.hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored secret.

        bcrypt compares digests in constant time.

        Raises:
            HashingError: If the stored secret is not a bcrypt hash.
        """
        return await asyncio.to_thread(self.verify_sync, password, password_hash)

    async def dummy_verify(self, password: str) -> None:
        """
        Spend the same effort as a real verification and discard the result.

        Used when there is no account to check against, so that an unknown
        email takes as long to reject as a wrong password.
        """
        await asyncio.to_thread(self._dummy_verify_sync, password)

    def _dummy_verify_sync(self, password: str) -> None:
        self.verify_sync(password, self._dummy_hash.decode("utf-8"))
