"""Domain errors.

None of these escape a render: callers in the domain catch them, log,
and degrade to a no-op or a partial result.
"""

from __future__ import annotations


class AdUnitsError(Exception):
    """Base class for ad unit errors."""


class InvalidIdentifier(AdUnitsError, ValueError):
    """A breakpoint or ad unit identifier is missing or malformed."""


class UnresolvedBreakpointReference(AdUnitsError, LookupError):
    """A size mapping names a breakpoint the registry does not know."""

    def __init__(self, identifier: str, slot_identifier: str | None = None) -> None:
        self.identifier = identifier
        self.slot_identifier = slot_identifier
        where = f" (ad unit {slot_identifier!r})" if slot_identifier else ""
        super().__init__(f"Unknown breakpoint {identifier!r}{where}")


class MalformedConfigEntry(AdUnitsError, ValueError):
    """A stored breakpoint entry is missing required fields or has bad widths."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Stored breakpoint at index {index} is malformed: {reason}")
