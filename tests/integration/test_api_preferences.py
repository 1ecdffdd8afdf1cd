from __future__ import annotations

from fastapi.testclient import TestClient
import pytest

from roadmap_hub.preferences import THEME_STORAGE_KEY
from roadmap_hub.theme import THEME_VARIABLES, THEMES
from roadmap_hub.web.middleware import REQUEST_ID_HEADER

pytestmark = [pytest.mark.integration]


def test_list_themes_marks_active_theme(client: TestClient) -> None:
    response = client.get("/api/v1/themes", headers={REQUEST_ID_HEADER: "api-1"})

    assert response.status_code == 200
    payload = response.json()
    assert [theme["id"] for theme in payload["data"]["themes"]] == list(THEMES)
    assert payload["data"]["active_theme_id"] == "emerald-forest"
    assert payload["meta"]["request_id"] == "api-1"


def test_theme_detail_and_not_found(client: TestClient) -> None:
    found = client.get("/api/v1/themes/arctic-frost")
    missing = client.get("/api/v1/themes/neon-disco")

    assert found.status_code == 200
    assert set(found.json()["data"]["colors"]) == THEME_VARIABLES
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "theme_not_found"


def test_select_theme_and_toggle_mode(client: TestClient) -> None:
    selected = client.post("/api/v1/preferences/theme", json={"theme_id": "midnight-purple"})

    assert selected.status_code == 200
    data = selected.json()["data"]
    assert data["theme_id"] == "midnight-purple"
    assert data["persistent"] is True
    assert data["variables"] == dict(THEMES["midnight-purple"].colors)
    assert client.cookies.get(THEME_STORAGE_KEY) == "midnight-purple"

    toggled = client.post("/api/v1/preferences/mode/toggle")
    assert toggled.json()["data"]["mode"] == "light"

    current = client.get("/api/v1/preferences").json()["data"]
    assert current["theme_id"] == "midnight-purple"
    assert current["mode"] == "light"


def test_select_unknown_theme_returns_unchanged_state(client: TestClient) -> None:
    response = client.post("/api/v1/preferences/theme", json={"theme_id": "neon-disco"})

    assert response.status_code == 200
    assert response.json()["data"]["theme_id"] == "emerald-forest"


def test_select_theme_validation_uses_error_envelope(client: TestClient) -> None:
    response = client.post("/api/v1/preferences/theme", json={"theme_id": ""})

    assert response.status_code == 422
    payload = response.json()
    assert payload["error"]["code"] == "validation_error"
    assert payload["error"]["details"]
