"""
Authentication module.

Handles password hashing, bearer tokens, account registration and signin.

Public API:
- IAuthService: Interface for auth operations
- PasswordHasher: bcrypt hashing and verification
- TokenService: Bearer token issuing and verification
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    Account,
    AccountSummary,
    TokenClaims,
    SignupRequest,
    SigninRequest,
    SignupResponse,
    SigninResponse,
)
from .passwords import PasswordHasher
from .tokens import TokenService, create_token_service
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    DuplicateEmailError,
    HashingError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Components
    "PasswordHasher",
    "TokenService",
    "create_token_service",
    # Models
    "Account",
    "AccountSummary",
    "TokenClaims",
    "SignupRequest",
    "SigninRequest",
    "SignupResponse",
    "SigninResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "DuplicateEmailError",
    "HashingError",
]
