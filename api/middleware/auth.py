"""
Bearer token authentication middleware.

get_current_user is the only place where request identity is
established. Route handlers receive the resulting AuthenticatedUser by
parameter and trust it without further checks.
"""

from fastapi import Depends, Request
from fastapi.security.utils import get_authorization_scheme_param

from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.tokens import TokenService
from shared.models import AuthenticatedUser

from ..dependencies import get_token_service


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an Authorization header value.

    Raises:
        MissingTokenError: No header, an empty header, or "Bearer" alone
        InvalidTokenError: A credential under some other scheme
    """
    if not authorization or not authorization.strip():
        raise MissingTokenError()

    scheme, token = get_authorization_scheme_param(authorization.strip())
    if scheme.lower() != "bearer":
        raise InvalidTokenError()
    if not token:
        raise MissingTokenError()
    return token


async def get_current_user(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user. The principal is
    also stored on request.state.user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    user = tokens.authenticate(token)
    request.state.user = user
    return user

