"""Domain layer for adunits."""

from .ad_slot import AdSlot, MappingTable, Size, parse_sizes
from .breakpoints import (
    Breakpoint,
    BreakpointRegistry,
    SimpleIdentifier,
    StoredBreakpoint,
    StructuredIdentifier,
    resolve_identifier,
)
from .errors import (
    AdUnitsError,
    InvalidIdentifier,
    MalformedConfigEntry,
    UnresolvedBreakpointReference,
)
from .hooks import FilterChain
from .placement import LAZY_LOAD_CLASS, UNIT_CLASS, PlacementAssembler
from .sanitizer import PLACEMENT_ALLOWED, sanitize
from .slot_collection import SessionSlotCollection
from .targeting_engine import TargetingBag, TargetingEngine

__all__ = [
    "AdSlot",
    "AdUnitsError",
    "Breakpoint",
    "BreakpointRegistry",
    "FilterChain",
    "InvalidIdentifier",
    "LAZY_LOAD_CLASS",
    "MalformedConfigEntry",
    "MappingTable",
    "PLACEMENT_ALLOWED",
    "PlacementAssembler",
    "SessionSlotCollection",
    "SimpleIdentifier",
    "Size",
    "StoredBreakpoint",
    "StructuredIdentifier",
    "TargetingBag",
    "TargetingEngine",
    "UNIT_CLASS",
    "UnresolvedBreakpointReference",
    "parse_sizes",
    "resolve_identifier",
    "sanitize",
]
