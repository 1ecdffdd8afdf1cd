from __future__ import annotations

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from roadmap_hub.api.errors import register_api_exception_handlers
from roadmap_hub.api.router import router as api_router
from roadmap_hub.content import load_catalog
from roadmap_hub.logging_config import configure_logging, parse_redact_fields
from roadmap_hub.settings import PACKAGE_ROOT, settings
from roadmap_hub.theme import resolve_mode
from roadmap_hub.web.middleware import (
    RequestLoggingMiddleware,
    ThemeStoreMiddleware,
    parse_skip_paths,
)
from roadmap_hub.web.routers import assets, health, roadmaps
from roadmap_hub.web.routers import settings as settings_routes

configure_logging(
    level=settings.log_level,
    log_format=settings.log_format,
    redact_fields=parse_redact_fields(settings.log_redact_fields),
    include_uvicorn_access=settings.log_uvicorn_access,
)

app = FastAPI(title=settings.app_name)
app.state.catalog = load_catalog(settings.content_dir)
register_api_exception_handlers(app)
app.add_middleware(
    ThemeStoreMiddleware,
    default_theme=settings.default_theme,
    default_mode=resolve_mode(settings.default_mode),
    cookie_max_age_seconds=settings.preference_cookie_max_age_days * 24 * 60 * 60,
    cookie_secure=settings.preference_cookie_secure,
)
app.add_middleware(
    RequestLoggingMiddleware,
    log_requests=settings.log_requests,
    skip_paths=parse_skip_paths(settings.log_request_skip_paths),
)
app.mount("/static", StaticFiles(directory=str(PACKAGE_ROOT / "static")), name="static")
app.include_router(api_router)
app.include_router(assets.router)
app.include_router(health.router)
app.include_router(roadmaps.router)
app.include_router(settings_routes.router)
