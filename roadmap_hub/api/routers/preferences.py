from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from roadmap_hub.api.errors import ApiException
from roadmap_hub.api.responses import success_payload
from roadmap_hub.api.schemas import (
    PreferencesEnvelope,
    ThemeEnvelope,
    ThemeSelectRequest,
    ThemesEnvelope,
)
from roadmap_hub.theme import THEMES, Theme, get_theme
from roadmap_hub.theme_store import ThemeStore, use_theme

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api-preferences"])


def _serialize_preferences(store: ThemeStore) -> dict[str, object]:
    selection = store.selection
    return {
        "theme_id": selection.theme_id,
        "mode": selection.mode.value,
        "persistent": store.persistent,
        "variables": dict(store.effects.variables),
    }


def _serialize_theme(theme: Theme) -> dict[str, object]:
    return {
        "id": theme.id,
        "name": theme.name,
        "emoji": theme.emoji,
        "description": theme.description,
        "preview": list(theme.preview),
        "colors": dict(theme.colors),
    }


@router.get("/themes", response_model=ThemesEnvelope)
async def list_themes(request: Request):
    store = use_theme(request)
    return success_payload(
        request,
        data={
            "themes": [_serialize_theme(theme) for theme in THEMES.values()],
            "active_theme_id": store.selection.theme_id,
        },
    )


@router.get("/themes/{theme_id}", response_model=ThemeEnvelope)
async def get_theme_detail(theme_id: str, request: Request):
    theme = get_theme(theme_id)
    if theme is None:
        raise ApiException(
            status_code=404,
            code="theme_not_found",
            message="Theme not found.",
        )
    return success_payload(request, data=_serialize_theme(theme))


@router.get("/preferences", response_model=PreferencesEnvelope)
async def get_preferences(request: Request):
    return success_payload(request, data=_serialize_preferences(use_theme(request)))


@router.post("/preferences/theme", response_model=PreferencesEnvelope)
async def select_theme(payload: ThemeSelectRequest, request: Request):
    store = use_theme(request)
    await store.select(payload.theme_id)
    logger.info(
        "api.preferences.theme_selected",
        extra={
            "event": "api.preferences.theme_selected",
            "requested_theme_id": payload.theme_id,
            "theme_id": store.selection.theme_id,
        },
    )
    return success_payload(request, data=_serialize_preferences(store))


@router.post("/preferences/mode/toggle", response_model=PreferencesEnvelope)
async def toggle_mode(request: Request):
    store = use_theme(request)
    mode = await store.toggle_mode()
    logger.info(
        "api.preferences.mode_toggled",
        extra={"event": "api.preferences.mode_toggled", "mode": mode.value},
    )
    return success_payload(request, data=_serialize_preferences(store))
