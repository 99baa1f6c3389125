"""Pre-built front-end bundle with a client-side routing fallback.

Registered last: any GET path no other router claimed either names a file
inside ``STATIC_DIR`` or falls back to the bundle's ``index.html``.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from starlette.responses import FileResponse, PlainTextResponse, Response

from app.core.config import Settings
from app.routers.deps import get_app_settings

router = APIRouter()


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(
    full_path: str,
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> Response:
    root = Path(settings.STATIC_DIR).resolve()

    if full_path:
        requested = (root / full_path).resolve()
        # never serve anything outside the bundle directory
        if requested.is_relative_to(root) and requested.is_file():
            return FileResponse(requested)

    index = root / "index.html"
    if index.is_file():
        return FileResponse(index)
    return PlainTextResponse("Not Found", status_code=404)
