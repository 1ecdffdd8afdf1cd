from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from roadmap_hub.content import ContentCatalog
from roadmap_hub.theme_store import use_theme
from roadmap_hub.web import common

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(
    request: Request,
    catalog: ContentCatalog = Depends(common.get_catalog),
) -> HTMLResponse:
    context = common.build_template_context(
        request,
        catalog=catalog,
        page_title="Settings",
    )
    return common.render_page(request, name="settings.html", context=context)


@router.post("/preferences/theme")
async def select_theme(
    request: Request,
    theme_id: Annotated[str, Form()],
    next_path: Annotated[str | None, Form(alias="next")] = None,
):
    store = use_theme(request)
    selection = await store.select(theme_id)
    logger.info(
        "preferences.theme_selected",
        extra={
            "event": "preferences.theme_selected",
            "requested_theme_id": theme_id,
            "theme_id": selection.theme_id,
            "persistent": store.persistent,
        },
    )
    return common.redirect_to(common.safe_redirect_target(next_path))


@router.post("/preferences/mode")
async def toggle_mode(
    request: Request,
    next_path: Annotated[str | None, Form(alias="next")] = None,
):
    store = use_theme(request)
    mode = await store.toggle_mode()
    logger.info(
        "preferences.mode_toggled",
        extra={
            "event": "preferences.mode_toggled",
            "mode": mode.value,
            "persistent": store.persistent,
        },
    )
    return common.redirect_to(common.safe_redirect_target(next_path))
