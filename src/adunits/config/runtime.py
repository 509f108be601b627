"""Pydantic-based runtime settings.

Loads from environment variables (``ADUNITS_`` prefix, optional .env file).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Used when neither the session, the site options nor the environment name a network.
PLACEHOLDER_NETWORK_CODE = "xxxxxx"


class RuntimeSettings(BaseSettings):
    """All configuration for ad unit rendering, validated at startup."""

    model_config = {"env_prefix": "ADUNITS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Ad server ---
    network_code: str | None = Field(
        default=None,
        description="Default network code when the site options do not set one",
    )

    # --- Persisted options ---
    options_path: str = Field(
        default="data/options.json",
        description="JSON file holding site options (dfw_breakpoints, dfw_network_code)",
    )

    # --- Mapping policy ---
    strict_mapping: bool = Field(
        default=False,
        description="Raise on size mappings that name unknown breakpoints instead of dropping them",
    )

    # --- Client assets ---
    debug: bool = Field(default=False, description="Serve unminified scripts and skip the inline init script")
    asset_base_url: str = Field(default="/static/adunits", description="Base URL for client scripts and styles")
    asset_version: str = Field(default="0.1.0", description="Cache-busting version for client assets")

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Log level for the adunits logger")

    @field_validator("asset_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("network_code")
    @classmethod
    def _blank_is_unset(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
