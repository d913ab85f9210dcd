"""
Bearer token issuing and verification.

Tokens are HS256-signed JWTs carrying the account id (sub), email,
issued-at and expiry. There is no server-side revocation: expiry and
secret rotation are the only ways a token stops working.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from shared.config import Settings
from shared.models import AuthenticatedUser

from .exceptions import InvalidTokenError
from .models import TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=2)
REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


class TokenService:
    """
    Issues and verifies signed, expiring bearer tokens.

    The secret is fixed for the lifetime of the instance.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(
        self,
        user: AuthenticatedUser,
        ttl: Optional[timedelta] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Issue a token for an authenticated principal.

        Args:
            user: Principal whose id and email become the token claims
            ttl: Lifetime override (defaults to the service TTL)
            now: Issue time override, for tests

        Returns:
            Encoded JWT (three dot-separated segments)
        """
        issued_at = now or datetime.now(timezone.utc)
        expires_at = issued_at + (ttl if ttl is not None else self._ttl)

        payload = {
            "sub": user.id,
            "email": user.email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token's signature and expiry.

        Returns:
            The token claims

        Raises:
            InvalidTokenError: For any bad, malformed, or expired token
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return TokenClaims(**payload)
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenError() from None
        except (jwt.InvalidTokenError, ValueError):
            logger.debug("Rejected invalid token")
            raise InvalidTokenError() from None

    def authenticate(self, token: str) -> AuthenticatedUser:
        """Verify a token and return the principal it identifies."""
        claims = self.verify(token)
        return AuthenticatedUser(id=claims.sub, email=claims.email)


def create_token_service(settings: Settings) -> TokenService:
    """
    Build the process-wide token service from settings.

    Production requires JWT_SECRET. Elsewhere a random secret is generated
    once per process, so tokens do not survive a restart.
    """
    secret = settings.jwt_secret
    if not secret:
        if settings.is_production:
            raise RuntimeError(
                "Token signing secret missing. Set the JWT_SECRET environment variable."
            )
        logger.warning("JWT_SECRET is not set; using an ephemeral signing secret")
        secret = secrets.token_urlsafe(32)

    return TokenService(
        secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.jwt_expire_minutes),
    )
