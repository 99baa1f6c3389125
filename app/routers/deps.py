"""Shared request dependencies: settings, collaborators and auth guards."""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.errors import Unauthorized
from app.db.supabase import get_supabase
from app.models.auth import AdminCredentials, Principal
from app.services.admin import check_admin_credentials
from app.services.candidates import CandidateGateway, DocumentStore, SupabaseDocumentStore
from app.services.identity import IdentityProvider, SupabaseIdentityProvider

bearer_scheme = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Return the settings injected into the app by ``create_app``."""
    return request.app.state.settings


def get_identity_provider(
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> IdentityProvider:
    return SupabaseIdentityProvider(
        get_supabase(settings), timeout=settings.EXTERNAL_CALL_TIMEOUT_SECONDS
    )


def get_document_store(
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> DocumentStore:
    return SupabaseDocumentStore(get_supabase(settings), settings.CANDIDATES_TABLE)


def get_candidate_gateway(
    store: DocumentStore = Depends(get_document_store),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> CandidateGateway:
    return CandidateGateway(store, timeout=settings.EXTERNAL_CALL_TIMEOUT_SECONDS)


async def require_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),  # noqa: B008
    provider: IdentityProvider = Depends(get_identity_provider),  # noqa: B008
) -> Principal:
    """Resolve the authenticated caller from the bearer token.

    A missing header (or one without a token segment) is rejected before the
    identity provider is contacted.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized(Unauthorized.NO_TOKEN)

    principal = await provider.verify_token(credentials.credentials)
    request.state.user = principal
    return principal


async def require_admin(
    body: AdminCredentials | None = None,
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> None:
    """Accept the request only if the body carries the configured admin secrets."""
    check_admin_credentials(body or AdminCredentials(), settings)
