"""Bearer token verification against Supabase Auth.

The provider checks signature, expiry and issuer; this module only maps the
outcome onto a ``Principal`` or a uniform ``Unauthorized`` so that callers
cannot tell failure causes apart.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from supabase import Client

from app.core.errors import Unauthorized
from app.models.auth import Principal

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    async def verify_token(self, token: str) -> Principal: ...


def _user_claims(user: Any) -> dict[str, Any]:
    dump = getattr(user, "model_dump", None)
    if callable(dump):
        claims = dump(mode="json")
        if isinstance(claims, dict):
            return claims
    return {}


class SupabaseIdentityProvider:
    """Verify access tokens with ``client.auth.get_user``."""

    def __init__(self, client: Client, timeout: float) -> None:
        self._client = client
        self._timeout = timeout

    async def verify_token(self, token: str) -> Principal:
        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self._client.auth.get_user, token),
                timeout=self._timeout,
            )
        except Exception as exc:
            logger.warning(
                "token_verification_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise Unauthorized(Unauthorized.INVALID_TOKEN) from exc

        user = getattr(response, "user", None) if response is not None else None
        if user is None or not getattr(user, "id", None):
            logger.warning("token_verification_failed", extra={"error_type": "NoUser"})
            raise Unauthorized(Unauthorized.INVALID_TOKEN)

        return Principal(
            uid=str(user.id),
            email=getattr(user, "email", None),
            claims=_user_claims(user),
        )
