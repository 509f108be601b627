"""Slots placed during one render."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .ad_slot import AdSlot, MappingTable
from .breakpoints import BreakpointRegistry


class SessionSlotCollection:
    """Ordered, append-only list of ad slots with a monotonic id sequence."""

    def __init__(self) -> None:
        self._slots: list[AdSlot] = []
        self._next_id = 1

    def create(self, identifier: str, sizes: Any) -> AdSlot:
        """Build a slot with the next id and append it.

        Raises ValueError for an unusable size spec; the id is not
        consumed in that case.
        """
        slot = AdSlot(self._next_id, identifier, sizes)
        self._next_id += 1
        self._slots.append(slot)
        return slot

    def mappings(self, registry: BreakpointRegistry, strict: bool = False) -> dict[str, MappingTable]:
        """``{"mapping<id>": table}`` for every slot declared with a size mapping."""
        return {
            slot.mapping_name: slot.mapping(registry, strict=strict)
            for slot in self._slots
            if slot.has_mapping()
        }

    def reset(self) -> None:
        self._slots.clear()
        self._next_id = 1

    def __iter__(self) -> Iterator[AdSlot]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)
