"""RenderSession: request-scoped state for one page render.

Each render owns its own breakpoint registry, slot collection, filter
chains and "assets enqueued" flag, so concurrent renders never share
slot ids or targeting data.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from ..config.runtime import PLACEHOLDER_NETWORK_CODE, RuntimeSettings, get_settings
from ..domain.breakpoints import BreakpointRegistry
from ..domain.hooks import FilterChain
from ..domain.placement import PlacementAssembler
from ..domain.slot_collection import SessionSlotCollection
from ..domain.targeting_engine import TargetingBag, TargetingEngine
from ..models.export import ClientAssets, ExportPayload
from ..models.page_context import PageContext
from ..models.placement import PlacementOptions
from ..observability import get_logger
from ..ports.options import BREAKPOINTS_OPTION, NETWORK_CODE_OPTION, InMemoryOptionStore, OptionStore
from .client_assets import build_client_assets, render_init_script

_LOGGER = get_logger("session")


class RenderSession:
    """Places ad units during a render and builds the export payload once at the end."""

    def __init__(
        self,
        network_code: str | None = None,
        option_store: OptionStore | None = None,
        registry: BreakpointRegistry | None = None,
        settings: RuntimeSettings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._options = option_store or InMemoryOptionStore()
        self._explicit_network_code = network_code
        if registry is None:
            registry = BreakpointRegistry()
            registry.load_from_config(self._options.get(BREAKPOINTS_OPTION))
        self.registry = registry
        self.slots = SessionSlotCollection()
        self._assembler = PlacementAssembler(self.slots)
        self._targeting_filters: FilterChain[TargetingBag] = FilterChain("dfw_targeting_criteria")
        self._export_filters: FilterChain[dict[str, Any]] = FilterChain("dfw_js_data")
        self._targeting = TargetingEngine(self._targeting_filters)
        self._assets_enqueued = False
        self._export: ExportPayload | None = None

    # -- breakpoints ---------------------------------------------------------

    def register_breakpoint(
        self,
        identifier: Any,
        min_width: int | None = None,
        max_width: int | None = None,
    ) -> bool:
        return self.registry.register(identifier, min_width, max_width)

    # -- placement -----------------------------------------------------------

    def place(
        self,
        identifier: Any,
        sizes: Any,
        options: PlacementOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Sanitized container markup for one ad unit ("" if the request is unusable)."""
        return self._assembler.place(identifier, sizes, options)

    def build_placement(
        self,
        identifier: Any,
        sizes: Any,
        options: PlacementOptions | Mapping[str, Any] | None = None,
    ) -> str:
        return self._assembler.build_placement(identifier, sizes, options)

    # -- extension points ----------------------------------------------------

    def add_targeting_filter(self, fn: Callable[[TargetingBag], TargetingBag]) -> None:
        self._targeting_filters.add(fn)

    def add_export_filter(self, fn: Callable[[dict[str, Any]], dict[str, Any]]) -> None:
        self._export_filters.add(fn)

    # -- export --------------------------------------------------------------

    @property
    def network_code(self) -> str:
        """Explicit value, else the site option, else the environment default, else a placeholder."""
        if self._explicit_network_code:
            return self._explicit_network_code
        stored = self._options.get(NETWORK_CODE_OPTION)
        if stored not in (None, ""):
            return str(stored)
        return self._settings.network_code or PLACEHOLDER_NETWORK_CODE

    def resolve_targeting(self, page: PageContext) -> TargetingBag:
        return self._targeting.resolve(page)

    def export(self, page: PageContext) -> ExportPayload:
        """Build, filter and freeze the export payload; later calls return the frozen payload."""
        if self._export is not None:
            return self._export

        data: dict[str, Any] = {
            "network_code": self.network_code,
            "mappings": self.slots.mappings(self.registry, strict=self._settings.strict_mapping),
            "targeting": self.resolve_targeting(page),
        }
        baseline = ExportPayload.model_validate(data)
        filtered = self._export_filters.apply(baseline.model_dump())
        try:
            payload = ExportPayload.model_validate(filtered)
        except ValidationError:
            _LOGGER.exception("export_filter_output_invalid")
            payload = baseline

        self._export = payload
        _LOGGER.debug(
            "export_finalized",
            extra={"slots": len(self.slots), "mappings": len(payload.mappings)},
        )
        return payload

    def enqueue_assets(self) -> ClientAssets | None:
        """Client assets the first time per session, None afterwards."""
        if self._assets_enqueued:
            return None
        self._assets_enqueued = True
        return build_client_assets(self._settings)

    def footer_script(self, page: PageContext) -> str:
        """Inline init script for eagerly loaded units; empty in debug mode."""
        if self._settings.debug:
            return ""
        return render_init_script(self.export(page))

    def reset(self) -> None:
        """Start a new render with the same registry."""
        self.slots.reset()
        self._assets_enqueued = False
        self._export = None
