"""Ad slot: one placed ad unit and its responsive size mapping."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, NamedTuple

from ..observability import get_logger
from .breakpoints import BreakpointRegistry
from .errors import UnresolvedBreakpointReference

_LOGGER = get_logger("ad_slot")

_DIMENSION_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")

MappingEntry = list[list[Any]]
MappingTable = list[MappingEntry]


class Size(NamedTuple):
    """Ad creative dimensions in pixels."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def _is_dimension(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def parse_sizes(raw: Any) -> tuple[Size, ...]:
    """Normalise a flat size spec into a tuple of Size.

    Accepts ``"300x250,728x90"``, a single ``(w, h)`` pair, or a
    sequence of pairs. Raises ValueError on anything else.
    """
    if isinstance(raw, str):
        sizes = []
        for part in raw.split(","):
            if not part.strip():
                continue
            m = _DIMENSION_RE.match(part)
            if m is None:
                raise ValueError(f"invalid dimension {part.strip()!r}; expected WIDTHxHEIGHT")
            sizes.append(Size(int(m.group(1)), int(m.group(2))))
        return tuple(sizes)
    if isinstance(raw, Sequence):
        if len(raw) == 2 and all(_is_dimension(v) for v in raw):
            return (Size(raw[0], raw[1]),)
        sizes = []
        for pair in raw:
            if (
                isinstance(pair, Sequence)
                and not isinstance(pair, str)
                and len(pair) == 2
                and all(_is_dimension(v) for v in pair)
            ):
                sizes.append(Size(pair[0], pair[1]))
            else:
                raise ValueError(f"invalid size pair {pair!r}; expected [width, height]")
        return tuple(sizes)
    raise ValueError(f"unsupported size spec type {type(raw).__name__}")


class AdSlot:
    """One ad placement request.

    ``sizes`` is either flat (a pair, a list of pairs, or a dimension
    string) or a mapping of breakpoint identifier to sizes. Only the
    mapping form produces a size mapping.
    """

    def __init__(self, slot_id: int, identifier: str, sizes: Any) -> None:
        self.id = slot_id
        self.identifier = identifier
        self._flat: tuple[Size, ...] = ()
        self._by_breakpoint: dict[str, tuple[Size, ...]] | None = None
        if isinstance(sizes, Mapping):
            self._by_breakpoint = {str(key): parse_sizes(value) for key, value in sizes.items()}
        else:
            self._flat = parse_sizes(sizes)
        self._mapping_cache: tuple[BreakpointRegistry, int, bool, tuple] | None = None

    def has_mapping(self) -> bool:
        return self._by_breakpoint is not None

    @property
    def mapping_name(self) -> str:
        return f"mapping{self.id}"

    def dimensions(self) -> str:
        """Flat sizes as ``"300x250,728x90"``; empty for mapped slots."""
        return ",".join(str(size) for size in self._flat)

    def mapping(self, registry: BreakpointRegistry, strict: bool = False) -> MappingTable:
        """Return ``[[min_width, max_width], [[w, h], ...]]`` per known breakpoint.

        Entries follow the order of the slot's own breakpoint keys.
        Unknown breakpoints are dropped, or raise
        UnresolvedBreakpointReference when ``strict`` is set.
        """
        if self._by_breakpoint is None:
            return []

        cached = self._mapping_cache
        if (
            cached is None
            or cached[0] is not registry
            or cached[1] != registry.revision
            or cached[2] != strict
        ):
            cached = (registry, registry.revision, strict, self._compute(registry, strict))
            self._mapping_cache = cached
        return [
            [list(width_range), [list(size) for size in sizes]]
            for width_range, sizes in cached[3]
        ]

    def _compute(self, registry: BreakpointRegistry, strict: bool) -> tuple:
        entries = []
        for name, sizes in self._by_breakpoint.items():
            breakpoint = registry.get(name)
            if breakpoint is None:
                if strict:
                    raise UnresolvedBreakpointReference(name, self.identifier)
                _LOGGER.debug(
                    "breakpoint_unresolved",
                    extra={"breakpoint": name, "ad_unit": self.identifier, "slot_id": self.id},
                )
                continue
            entries.append(((breakpoint.min_width, breakpoint.max_width), sizes))
        return tuple(entries)

    def __repr__(self) -> str:
        return f"<AdSlot {self.id} {self.identifier!r}>"
