"""Composition root: the single place where all wiring happens.

Call ``build_session()`` at the start of each render to get a fresh,
request-scoped RenderSession backed by the configured option store.
"""

from __future__ import annotations

from .adapters.json_option_store import JsonFileOptionStore
from .config.runtime import RuntimeSettings, get_settings
from .domain.breakpoints import BreakpointRegistry
from .ports.options import BREAKPOINTS_OPTION, OptionStore
from .services.render_session import RenderSession


def build_option_store(settings: RuntimeSettings | None = None) -> OptionStore:
    """Construct the file-backed option store."""
    settings = settings or get_settings()
    return JsonFileOptionStore(settings.options_path)


def build_registry(option_store: OptionStore) -> BreakpointRegistry:
    """Construct a registry preloaded with the stored breakpoints."""
    registry = BreakpointRegistry()
    registry.load_from_config(option_store.get(BREAKPOINTS_OPTION))
    return registry


def build_session(
    network_code: str | None = None,
    settings: RuntimeSettings | None = None,
    option_store: OptionStore | None = None,
) -> RenderSession:
    """Construct a RenderSession with real adapters."""
    settings = settings or get_settings()
    option_store = option_store or build_option_store(settings)
    return RenderSession(
        network_code=network_code,
        option_store=option_store,
        registry=build_registry(option_store),
        settings=settings,
    )
