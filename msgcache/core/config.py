"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Every variable is read with the MCP_ prefix
(e.g. MCP_MSG_PREFIXES, MCP_ENABLE_DEBUG). Catalog backend settings are
validated at load time.
"""

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from msgcache.core.constants import DEFAULT_MSG_PREFIXES

CATALOG_BACKENDS = ("json", "memory")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults. msg_prefixes accepts either a
    JSON list or a comma-separated string; entries must be strings and are
    matched literally.
    """

    # App
    app_name: str = "message-cache-performance"
    app_version: str = "1.0.0"
    debug: bool = False

    # Localisation
    language_code: str = "en"
    # Further locales a request may select with the locale header.
    extra_locales: Annotated[list[str], NoDecode] = []
    # Literal prefixes of message keys that cannot exist and cannot be customized.
    msg_prefixes: Annotated[list[str], NoDecode] = list(DEFAULT_MSG_PREFIXES)
    # Append skipped message keys as an HTML comment to rendered pages.
    enable_debug: bool = False

    # Catalog: "json" (directory of <locale>.json files) or "memory" (catalog passed to create_app)
    catalog_backend: str = "json"
    catalog_path: str = ""

    # Request / middleware
    tenant_header_name: str = "X-Tenant-ID"
    locale_header_name: str = "X-Locale"
    request_id_header: str = "X-Request-ID"

    # Redis cache (downstream store of customized messages)
    redis_enabled: bool = False
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: SecretStr | None = None
    cache_ttl_messages: int = 3600

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_prefix="MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("msg_prefixes", "extra_locales", mode="before")
    @classmethod
    def split_list(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string from the environment."""
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.startswith("["):
                return json.loads(stripped)
            return [p.strip() for p in stripped.split(",") if p.strip()]
        return value

    @model_validator(mode="after")
    def validate_catalog(self) -> "Settings":
        """Validate catalog backend.

        - json: MCP_CATALOG_PATH required (directory holding <locale>.json files).
        - memory: no extra settings.
        """
        if self.catalog_backend not in CATALOG_BACKENDS:
            raise ValueError(
                f"catalog_backend must be one of {CATALOG_BACKENDS!r}, got: {self.catalog_backend!r}"
            )
        if self.catalog_backend == "json" and not self.catalog_path:
            raise ValueError(
                "MCP_CATALOG_PATH is required when catalog_backend is 'json'. "
                "Set in environment or .env file."
            )
        if not self.language_code:
            raise ValueError("MCP_LANGUAGE_CODE must not be empty")
        return self

    @property
    def served_locales(self) -> tuple[str, ...]:
        """Default locale first, then extra_locales (duplicates dropped)."""
        return tuple(dict.fromkeys([self.language_code, *self.extra_locales]))


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
