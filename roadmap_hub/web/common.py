from __future__ import annotations

import logging
from urllib.parse import urlsplit

from fastapi import Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from roadmap_hub.content import ContentCatalog
from roadmap_hub.presentation.accordion import OPEN_PARAM
from roadmap_hub.presentation.navigation import EXPAND_PARAM, build_navigation
from roadmap_hub.presentation.roadmaps import build_roadmap_cards
from roadmap_hub.presentation.themes import build_theme_controls
from roadmap_hub.settings import PACKAGE_ROOT, settings
from roadmap_hub.theme_store import use_theme

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(PACKAGE_ROOT / "templates"))


def get_catalog(request: Request) -> ContentCatalog:
    return request.app.state.catalog


def preserved_params(request: Request, *names: str) -> dict[str, str]:
    """Current values of ``names`` from the query string, for links that must keep them."""
    return {name: request.query_params[name] for name in names if name in request.query_params}


def build_template_context(
    request: Request,
    *,
    catalog: ContentCatalog,
    page_title: str,
) -> dict[str, object]:
    store = use_theme(request)
    return {
        "app_name": settings.app_name,
        "page_title": page_title,
        "current_path": request.url.path,
        "document": store.effects,
        "theme_controls": build_theme_controls(store.selection),
        "navigation": build_navigation(
            request.url.path,
            catalog,
            expanded=request.query_params.get(EXPAND_PARAM),
            preserved=preserved_params(request, OPEN_PARAM),
        ),
    }


def render_page(
    request: Request,
    *,
    name: str,
    context: dict[str, object],
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request=request,
        name=name,
        context=context,
        status_code=status_code,
    )


def render_not_found(
    request: Request,
    *,
    catalog: ContentCatalog,
    message: str,
    fallback_label: str = "All Roadmaps",
    fallback_href: str = "/",
) -> HTMLResponse:
    logger.info(
        "content.not_found",
        extra={"event": "content.not_found", "path": request.url.path},
    )
    context = build_template_context(request, catalog=catalog, page_title="Not found")
    context["message"] = message
    context["fallback_label"] = fallback_label
    context["fallback_href"] = fallback_href
    context["roadmaps"] = build_roadmap_cards(catalog) if fallback_href == "/" else []
    return render_page(
        request,
        name="not_found.html",
        context=context,
        status_code=status.HTTP_404_NOT_FOUND,
    )


def safe_redirect_target(candidate: str | None, *, default: str = "/") -> str:
    """Only same-site absolute paths are accepted as redirect targets."""
    if not candidate:
        return default
    parts = urlsplit(candidate)
    if parts.scheme or parts.netloc or not candidate.startswith("/") or candidate.startswith("//"):
        return default
    if "\\" in candidate:
        return default
    return candidate


def redirect_to(path: str) -> RedirectResponse:
    return RedirectResponse(path, status_code=status.HTTP_303_SEE_OTHER)
