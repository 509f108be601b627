"""Port: persisted site options."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

BREAKPOINTS_OPTION = "dfw_breakpoints"
NETWORK_CODE_OPTION = "dfw_network_code"


@runtime_checkable
class OptionStore(Protocol):
    """Read-only access to saved site options."""

    def get(self, name: str, default: Any = None) -> Any: ...


# ---------------------------------------------------------------------------
# Default implementation (pure stdlib, no infra deps)
# ---------------------------------------------------------------------------


class InMemoryOptionStore:
    """Options held in a dict; used by tests and embedding callers."""

    def __init__(self, options: dict[str, Any] | None = None) -> None:
        self._options = dict(options or {})

    def get(self, name: str, default: Any = None) -> Any:
        return self._options.get(name, default)
