from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from roadmap_hub.content import ContentCatalog
from roadmap_hub.web import common

router = APIRouter()


@router.get("/healthz")
async def healthz(catalog: ContentCatalog = Depends(common.get_catalog)) -> dict[str, str]:
    if catalog.roadmaps:
        return {"status": "ok"}
    raise HTTPException(status_code=500, detail="content unavailable")
