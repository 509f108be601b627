"""Runtime configuration."""

from .runtime import PLACEHOLDER_NETWORK_CODE, RuntimeSettings, get_settings

__all__ = ["PLACEHOLDER_NETWORK_CODE", "RuntimeSettings", "get_settings"]
