"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. NODE_STORE_BASE_URL is validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults except node_store_base_url, which
    validate_node_store requires to be an http(s) URL.
    """

    # App
    app_name: str = "catalog"
    app_version: str = "1.0.0"
    debug: bool = False

    # Node store (upstream system of record for the category tree)
    node_store_base_url: str = ""
    node_store_api_key: SecretStr = SecretStr("")
    node_store_timeout_seconds: float = 30.0
    # Page size for tree aggregation and trash listing.
    node_store_page_size: int = 100
    # Page size when enumerating root siblings (bulk copy / bulk move).
    sibling_page_size: int = 200
    # Log request and response bodies of every node store call.
    debug_traffic: bool = False

    # Request metadata defaults (used when the caller supplies none)
    default_user_id: str = "catalog"
    admin_key: SecretStr | None = None

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_node_store(self) -> "Settings":
        """Validate node store URL and paging limits."""
        url = self.node_store_base_url.strip()
        if not url:
            raise ValueError(
                "NODE_STORE_BASE_URL is required. Set in environment or .env file."
            )
        if not url.startswith(("http://", "https://")):
            raise ValueError(
                f"NODE_STORE_BASE_URL must be an http(s) URL, got: {url!r}"
            )
        self.node_store_base_url = url.rstrip("/")
        if self.node_store_page_size < 1 or self.sibling_page_size < 1:
            raise ValueError("node_store_page_size and sibling_page_size must be >= 1")
        if self.node_store_timeout_seconds <= 0:
            raise ValueError("node_store_timeout_seconds must be positive")
        return self


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
