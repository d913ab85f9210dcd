"""
Database client factory for Supabase.

The backend talks to storage exclusively through one service-role client.
Ownership is enforced in the blog service, not through row level security.
"""

from typing import Optional
from supabase import ClientOptions, create_client, Client

from .config import Settings, get_settings

# Module-level client cache
_client: Optional[Client] = None


def _build_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    options = ClientOptions(postgrest_client_timeout=settings.supabase_timeout)
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=options,
    )


def get_supabase_client() -> Client:
    """
    Get the shared service-role Supabase client, creating it on first use.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _client
    if _client is None:
        _client = _build_client(get_settings())
    return _client


def reset_client_cache() -> None:
    """Drop the cached client; the next call builds a new one."""
    global _client
    _client = None
