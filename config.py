"""
Centralised settings loader.

Values come from the process environment (or a local `.env`).  The app
factory receives a `Settings` instance explicitly; `settings` below is only
the default used by `main.py` and the CLI.
"""

from __future__ import annotations
from functools import lru_cache

from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class Settings(BaseSettings):
    # ─── runtime ────────────────────────────────────────────────────
    env_name: str = "local"
    port: int = 3000
    log_level: str = "INFO"

    # ─── Gemini ─────────────────────────────────────────────────────
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"

    # ─── HTTP surface ───────────────────────────────────────────────
    static_dir: str = "public"
    max_request_bytes: int = Field(10 * 1024 * 1024, gt=0)

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> Settings:  # pragma: no cover
    return Settings()


settings: Settings = _cached()


# ------------------------------------------------------------------ #
#  Per-app accessor (FastAPI dependency)
# ------------------------------------------------------------------ #
def get_settings(request: Request) -> Settings:
    """Settings the running app was built with (see `main.create_app`)."""
    return request.app.state.settings
