"""
Central settings module.

All configuration comes from environment variables (or .env in local dev).
Never import settings directly from this file; always use the `settings`
singleton at the bottom so the entire service shares one instance.

The fee engine itself is pure and takes no configuration; these settings
only govern the host application around it.
"""

import json

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # silently ignore unrecognised env vars
        case_sensitive=False,
    )

    # ── Environment ────────────────────────────────────────────────────────
    environment: str = "development"
    log_level: str = "INFO"

    # ── Catalog ────────────────────────────────────────────────────────────
    # Re-run the catalog integrity check in the app lifespan and refuse to
    # start on a broken catalog.
    check_catalog_on_startup: bool = True

    # ── CORS ───────────────────────────────────────────────────────────────
    # Stored as str so pydantic-settings doesn't try to JSON-parse it at the
    # source layer. Use the `allowed_origins` property below for the parsed
    # list. Accepts: plain URL, comma-separated, or JSON array.
    # Set via ALLOWED_ORIGINS env var.  Ignored in development.
    allowed_origins_raw: str = Field(default="", validation_alias="allowed_origins")

    @property
    def allowed_origins(self) -> list[str]:
        raw = self.allowed_origins_raw.strip()
        if not raw:
            return []
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
                if isinstance(parsed, list):
                    return [str(x) for x in parsed]
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    # ── Derived helpers ────────────────────────────────────────────────────
    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


# Singleton: import this everywhere
settings = Settings()
