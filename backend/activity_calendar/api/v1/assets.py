"""Raw image files of participant folders."""
from __future__ import annotations

import mimetypes

from fastapi import APIRouter
from fastapi.responses import FileResponse

from activity_calendar.api.deps import RootDep
from activity_calendar.services.participants import resolve_asset

router = APIRouter()

# Not registered by default on every platform
mimetypes.add_type("image/webp", ".webp")
mimetypes.add_type("image/bmp", ".bmp")


@router.get("/{name}/{filename}", summary="Serve participant image", include_in_schema=False)
def serve_asset(name: str, filename: str, root: RootDep) -> FileResponse:
    path = resolve_asset(name, filename, root)
    media_type, _ = mimetypes.guess_type(path.name)
    return FileResponse(path, media_type=media_type or "application/octet-stream")
