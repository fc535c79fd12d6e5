from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from starlette.requests import Request

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    port: int
    ai_provider: str
    openai_api_key: str | None
    openai_model: str
    openai_base_url: str | None
    openai_timeout_s: float
    api_key: str | None
    access_policy_enabled: bool
    rate_limit: str
    trust_x_forwarded_for: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    max_upload_bytes: int
    max_text_chars: int


def load_settings() -> Settings:
    return Settings(
        port=_get_env_int("PORT", 4000),
        ai_provider=(_get_env("AI_PROVIDER", "openai") or "openai").strip().lower(),
        openai_api_key=_get_env("OPENAI_API_KEY"),
        openai_model=(_get_env("OPENAI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip(),
        openai_base_url=_get_env("OPENAI_BASE_URL"),
        openai_timeout_s=_get_env_float("OPENAI_TIMEOUT_S", 30.0),
        api_key=_get_env("API_KEY"),
        access_policy_enabled=_get_env_bool("ACCESS_POLICY_ENABLED", True),
        rate_limit=_get_env("RATE_LIMIT", "120/minute") or "120/minute",
        trust_x_forwarded_for=_get_env_bool("TRUST_X_FORWARDED_FOR", False),
        log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
        sentry_dsn=_get_env("SENTRY_DSN"),
        cors_allowed_origins=_get_env_list("CORS_ALLOWED_ORIGINS", ["*"]),
        max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024),
        max_text_chars=_get_env_int("MAX_TEXT_CHARS", 0),
    )


settings = load_settings()

if settings.max_upload_bytes <= 0:
    raise RuntimeError("MAX_UPLOAD_BYTES must be a positive integer.")

if settings.ai_provider not in {"openai"}:
    raise RuntimeError(f"Unsupported AI_PROVIDER='{settings.ai_provider}'. Supported providers: openai.")


def get_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", settings)
