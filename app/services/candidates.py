"""Candidate persistence on the Supabase ``candidates`` table.

``SupabaseDocumentStore`` is the thin synchronous adapter over the table;
``CandidateGateway`` runs it off the event loop with a deadline and turns
every failure into a ``StoreError`` tagged with the operation's context.

Semantics:
- create returns the identifier assigned by the database
- update merges only the supplied fields into an existing row
- delete is idempotent: removing an unknown identifier succeeds
- list returns rows in whatever order the database yields them
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from supabase import Client

from app.core.errors import CandidateNotFound, StoreError
from app.models.candidate import Candidate, CandidateInput

logger = logging.getLogger(__name__)

T = TypeVar("T")

ADD_CONTEXT = "Error adding candidate"
UPDATE_CONTEXT = "Error updating candidate"
DELETE_CONTEXT = "Error deleting candidate"
FETCH_CONTEXT = "Error fetching candidates"


class DocumentStore(Protocol):
    def add(self, data: dict[str, Any]) -> str: ...

    def get_all(self) -> list[dict[str, Any]]: ...

    def update(self, doc_id: str, data: dict[str, Any]) -> bool: ...

    def delete(self, doc_id: str) -> None: ...


class SupabaseDocumentStore:
    """Schema-less view of a single Supabase table keyed by ``id``."""

    def __init__(self, client: Client, table: str = "candidates") -> None:
        self._client = client
        self._table = table

    def add(self, data: dict[str, Any]) -> str:
        result = self._client.table(self._table).insert(data).execute()
        rows = result.data or []
        if not rows or "id" not in rows[0]:
            raise RuntimeError("insert returned no row")
        return str(rows[0]["id"])

    def get_all(self) -> list[dict[str, Any]]:
        result = self._client.table(self._table).select("*").execute()
        return list(result.data or [])

    def update(self, doc_id: str, data: dict[str, Any]) -> bool:
        """Merge *data* into the row; return False if no row has *doc_id*."""
        table = self._client.table(self._table)
        if data:
            result = table.update(data).eq("id", doc_id).execute()
        else:
            # Nothing to write, but the identifier must still resolve
            result = table.select("id").eq("id", doc_id).limit(1).execute()
        return bool(result.data)

    def delete(self, doc_id: str) -> None:
        self._client.table(self._table).delete().eq("id", doc_id).execute()


class CandidateGateway:
    """Async CRUD over a ``DocumentStore`` with per-call deadlines."""

    def __init__(self, store: DocumentStore, timeout: float = 10.0) -> None:
        self._store = store
        self._timeout = timeout

    async def _call(self, context: str, func: Callable[..., T], *args: Any) -> T:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(func, *args), timeout=self._timeout
            )
        except TimeoutError as exc:
            logger.error(
                "candidate_store_timeout",
                extra={"context": context, "timeout_seconds": self._timeout},
            )
            raise StoreError(context, f"timed out after {self._timeout:g}s") from exc
        except Exception as exc:
            logger.error(
                "candidate_store_failed",
                extra={"context": context, "error_message": str(exc)},
            )
            raise StoreError(context, str(exc)) from exc

    async def create(self, payload: CandidateInput) -> str:
        candidate_id = await self._call(ADD_CONTEXT, self._store.add, payload.to_document())
        logger.info("candidate_created", extra={"candidate_id": candidate_id})
        return candidate_id

    async def update(self, candidate_id: str, payload: CandidateInput) -> None:
        found = await self._call(
            UPDATE_CONTEXT, self._store.update, candidate_id, payload.to_document()
        )
        if not found:
            raise CandidateNotFound(UPDATE_CONTEXT, candidate_id)
        logger.info("candidate_updated", extra={"candidate_id": candidate_id})

    async def delete(self, candidate_id: str) -> None:
        await self._call(DELETE_CONTEXT, self._store.delete, candidate_id)
        logger.info("candidate_deleted", extra={"candidate_id": candidate_id})

    async def list_all(self) -> list[Candidate]:
        rows = await self._call(FETCH_CONTEXT, self._store.get_all)
        try:
            return [Candidate.from_document(row) for row in rows]
        except Exception as exc:
            raise StoreError(FETCH_CONTEXT, str(exc)) from exc
