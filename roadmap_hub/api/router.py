from __future__ import annotations

from fastapi import APIRouter

from roadmap_hub.api.routers import preferences

router = APIRouter(prefix="/api/v1")
router.include_router(preferences.router)
