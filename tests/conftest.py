"""Shared test fixtures.

Provides a ``test_client`` for the default FastAPI app, mock Supabase client
fixtures for the health router, and an ``api_client`` wired to in-memory
identity and document store fakes.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

VALID_TOKEN = "valid-token"
ADMIN_NAME = "admin"
ADMIN_PASSWORD = "s3cret"


class InMemoryDocumentStore:
    """Dict-backed stand-in for the candidates table."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}

    def add(self, data: dict[str, Any]) -> str:
        doc_id = uuid4().hex
        self.documents[doc_id] = dict(data)
        return doc_id

    def get_all(self) -> list[dict[str, Any]]:
        return [{"id": doc_id, **data} for doc_id, data in self.documents.items()]

    def update(self, doc_id: str, data: dict[str, Any]) -> bool:
        if doc_id not in self.documents:
            return False
        self.documents[doc_id].update(data)
        return True

    def delete(self, doc_id: str) -> None:
        self.documents.pop(doc_id, None)


class StaticIdentityProvider:
    """Accepts only ``VALID_TOKEN``."""

    async def verify_token(self, token: str):
        from app.core.errors import Unauthorized
        from app.models.auth import Principal

        if token != VALID_TOKEN:
            raise Unauthorized(Unauthorized.INVALID_TOKEN)
        return Principal(uid="user-123", email="user@example.com", claims={"role": "authenticated"})


@pytest.fixture()
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture()
def document_store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture()
def static_dir(tmp_path: Path) -> Path:
    bundle = tmp_path / "build"
    (bundle / "static").mkdir(parents=True)
    (bundle / "index.html").write_text("<html>candidates app</html>")
    (bundle / "static" / "main.js").write_text("console.log('app');")
    return bundle


@pytest.fixture()
def api_settings(static_dir: Path):
    from app.core.config import Settings

    return Settings(  # type: ignore[call-arg]
        SUPABASE_URL="https://test.supabase.co",
        SUPABASE_KEY="test-key",
        ADMIN_NAME=ADMIN_NAME,
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        STATIC_DIR=str(static_dir),
        EXTERNAL_CALL_TIMEOUT_SECONDS=2.0,
    )


@pytest.fixture()
def api_client(
    api_settings, document_store: InMemoryDocumentStore
) -> Generator[TestClient, None, None]:
    """TestClient with the Supabase collaborators replaced by fakes."""
    from app.main import create_app
    from app.routers.deps import get_document_store, get_identity_provider

    application = create_app(api_settings)
    application.dependency_overrides[get_identity_provider] = StaticIdentityProvider
    application.dependency_overrides[get_document_store] = lambda: document_store

    with TestClient(application) as client:
        yield client


@pytest.fixture()
def mock_supabase_module() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client at module level in the health router."""
    mock_client = MagicMock()
    # Mock the select -> limit -> execute chain
    mock_table = MagicMock()
    mock_select = MagicMock()
    mock_limit = MagicMock()

    mock_client.table.return_value = mock_table
    mock_table.select.return_value = mock_select
    mock_select.limit.return_value = mock_limit
    mock_limit.execute.return_value = MagicMock()  # non-None result

    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient for the default app."""
    from app.main import app

    with TestClient(app) as client:
        yield client
