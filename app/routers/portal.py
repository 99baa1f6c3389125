"""Home page and admin portal endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import PlainTextResponse

from app.routers.deps import require_admin, require_principal

router = APIRouter()

ADMIN_WELCOME: dict[str, Any] = {"message": "Welcome to the Admin Portal!", "success": True}


@router.get(
    "/home",
    response_class=PlainTextResponse,
    dependencies=[Depends(require_principal)],
)
async def home() -> str:
    return "Welcome to the Home page!"


@router.get("/admin-portal", dependencies=[Depends(require_principal)])
async def admin_portal() -> dict[str, Any]:
    return ADMIN_WELCOME


@router.post("/admin-portal", dependencies=[Depends(require_admin)])
async def admin_login() -> dict[str, Any]:
    """Admin login: the body must carry ``adminName`` and ``adminPassword``."""
    return ADMIN_WELCOME
