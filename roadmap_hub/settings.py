from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    log_format: str
    log_redact_fields: str
    log_requests: bool
    log_request_skip_paths: str
    log_uvicorn_access: bool
    content_dir: str
    default_theme: str
    default_mode: str
    preference_cookie_max_age_days: int
    preference_cookie_secure: bool


def load_settings() -> Settings:
    return Settings(
        app_name=_env_str("APP_NAME", "Learning Hub"),
        log_level=_env_str("LOG_LEVEL", "INFO"),
        log_format=_env_str("LOG_FORMAT", "console"),
        log_redact_fields=_env_str("LOG_REDACT_FIELDS", ""),
        log_requests=_env_bool("LOG_REQUESTS", True),
        log_request_skip_paths=_env_str("LOG_REQUEST_SKIP_PATHS", "/healthz,/static/"),
        log_uvicorn_access=_env_bool("LOG_UVICORN_ACCESS", False),
        content_dir=_env_str("CONTENT_DIR", str(PACKAGE_ROOT / "content" / "data")),
        default_theme=_env_str("DEFAULT_THEME", "emerald-forest"),
        default_mode=_env_str("DEFAULT_MODE", "dark"),
        preference_cookie_max_age_days=max(1, _env_int("PREFERENCE_COOKIE_MAX_AGE_DAYS", 365)),
        preference_cookie_secure=_env_bool("PREFERENCE_COOKIE_SECURE", False),
    )


settings = load_settings()
