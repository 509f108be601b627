"""adunits: responsive ad unit placement, size mapping and page targeting."""

from .domain import AdSlot, BreakpointRegistry, TargetingEngine
from .models import ExportPayload, PageContext, PlacementOptions
from .services import RenderSession

__version__ = "0.1.0"
__all__ = [
    "AdSlot",
    "BreakpointRegistry",
    "ExportPayload",
    "PageContext",
    "PlacementOptions",
    "RenderSession",
    "TargetingEngine",
]
