from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from roadmap_hub.rendering import highlight_stylesheet

router = APIRouter()


@router.get("/highlight.css", include_in_schema=False)
async def highlight_css() -> Response:
    return Response(
        highlight_stylesheet(),
        media_type="text/css",
        headers={"Cache-Control": "public, max-age=86400"},
    )
