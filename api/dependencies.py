"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Configuration and the storage client are read once and
handed to the services explicitly; nothing below this layer looks them
up on its own.

Tests replace the whole wiring by overriding get_container.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.repository import AccountRepository
    from modules.auth.tokens import TokenService
    from modules.blogs.interfaces import IBlogService
    from modules.blogs.repository import BlogRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear all cached services.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: "Optional[Client]" = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._db = db
        self._password_hasher: "PasswordHasher | None" = None
        self._token_service: "TokenService | None" = None
        self._account_repository: "AccountRepository | None" = None
        self._blog_repository: "BlogRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._blog_service: "IBlogService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self._settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def token_service(self) -> "TokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import create_token_service
            self._token_service = create_token_service(self._settings)
        return self._token_service

    @property
    def account_repository(self) -> "AccountRepository":
        """Get the account repository instance."""
        if self._account_repository is None:
            from modules.auth.repository import AccountRepository
            self._account_repository = AccountRepository(self.db)
        return self._account_repository

    @property
    def blog_repository(self) -> "BlogRepository":
        """Get the blog repository instance."""
        if self._blog_repository is None:
            from modules.blogs.repository import BlogRepository
            self._blog_repository = BlogRepository(self.db)
        return self._blog_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                repository=self.account_repository,
                hasher=self.password_hasher,
                tokens=self.token_service,
            )
        return self._auth_service

    @property
    def blogs(self) -> "IBlogService":
        """Get the blog service instance."""
        if self._blog_service is None:
            from modules.blogs.models import BlogReadScope
            from modules.blogs.service import BlogService
            self._blog_service = BlogService(
                repository=self.blog_repository,
                read_scope=BlogReadScope(self._settings.blog_read_scope),
            )
        return self._blog_service

    def reset(self) -> None:
        """
        Reset all cached services.

        The token service is rebuilt too, so an ephemeral signing secret
        changes and previously issued tokens stop verifying.
        """
        self._password_hasher = None
        self._token_service = None
        self._account_repository = None
        self._blog_repository = None
        self._auth_service = None
        self._blog_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(
    container: ServiceContainer = Depends(get_container),
) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return container.auth


def get_token_service(
    container: ServiceContainer = Depends(get_container),
) -> "TokenService":
    """FastAPI dependency for token service."""
    return container.token_service


def get_blog_service(
    container: ServiceContainer = Depends(get_container),
) -> "IBlogService":
    """FastAPI dependency for blog service."""
    return container.blogs
