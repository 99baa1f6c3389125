"""Candidate CRUD endpoints.

Every route requires a verified bearer token.  Store failures surface as
plaintext ``"<context>: <message>"`` responses via the app's error handlers.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.responses import PlainTextResponse

from app.models.candidate import Candidate, CandidateInput
from app.routers.deps import get_candidate_gateway, require_principal
from app.services.candidates import CandidateGateway

router = APIRouter(dependencies=[Depends(require_principal)])


@router.post("", status_code=201, response_class=PlainTextResponse)
async def add_candidate(
    payload: CandidateInput | None = None,
    gateway: CandidateGateway = Depends(get_candidate_gateway),  # noqa: B008
) -> str:
    candidate_id = await gateway.create(payload or CandidateInput())
    return f"Candidate added with ID: {candidate_id}"


@router.put("/{candidate_id}", response_class=PlainTextResponse)
async def update_candidate(
    candidate_id: str,
    payload: CandidateInput | None = None,
    gateway: CandidateGateway = Depends(get_candidate_gateway),  # noqa: B008
) -> str:
    """Merge the supplied fields into an existing candidate."""
    await gateway.update(candidate_id, payload or CandidateInput())
    return "Candidate updated successfully"


@router.delete("/{candidate_id}", response_class=PlainTextResponse)
async def delete_candidate(
    candidate_id: str,
    gateway: CandidateGateway = Depends(get_candidate_gateway),  # noqa: B008
) -> str:
    await gateway.delete(candidate_id)
    return "Candidate deleted successfully"


@router.get("", response_model=list[Candidate], response_model_exclude_none=True)
async def list_candidates(
    gateway: CandidateGateway = Depends(get_candidate_gateway),  # noqa: B008
) -> list[Candidate]:
    return await gateway.list_all()
