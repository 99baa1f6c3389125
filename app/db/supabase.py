"""Supabase client singleton.

Provides ``get_supabase()`` which returns a lazily-initialized, process-wide
Supabase client.  The same client serves both token verification
(``client.auth``) and the candidates table (``client.table``).
"""

from supabase import Client, create_client

from app.core.config import Settings, get_settings

_client: Client | None = None


def get_supabase(settings: Settings | None = None) -> Client:
    """Return the singleton Supabase client, creating it on first call."""
    global _client
    if _client is None:
        settings = settings or get_settings()
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client
