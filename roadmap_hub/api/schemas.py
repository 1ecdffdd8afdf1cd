from __future__ import annotations

from pydantic import BaseModel, Field


class ResponseMeta(BaseModel):
    request_id: str | None = None


class ThemeItem(BaseModel):
    id: str
    name: str
    emoji: str
    description: str
    preview: list[str]
    colors: dict[str, str]


class ThemeEnvelope(BaseModel):
    data: ThemeItem
    meta: ResponseMeta


class ThemesData(BaseModel):
    themes: list[ThemeItem]
    active_theme_id: str


class ThemesEnvelope(BaseModel):
    data: ThemesData
    meta: ResponseMeta


class PreferencesData(BaseModel):
    theme_id: str
    mode: str
    persistent: bool
    variables: dict[str, str]


class PreferencesEnvelope(BaseModel):
    data: PreferencesData
    meta: ResponseMeta


class ThemeSelectRequest(BaseModel):
    theme_id: str = Field(min_length=1, max_length=128)
