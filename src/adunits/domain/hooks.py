"""Ordered transformation chains used as extension points."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from ..observability import get_logger

_LOGGER = get_logger("hooks")

T = TypeVar("T")


class FilterChain(Generic[T]):
    """Callables applied in registration order; each receives and returns the value.

    A filter that raises or returns None is logged and skipped; the
    chain continues with the value it was given.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._filters: list[Callable[[T], T]] = []

    def add(self, fn: Callable[[T], T]) -> None:
        self._filters.append(fn)

    def apply(self, value: T) -> T:
        for fn in self._filters:
            try:
                result = fn(value)
            except Exception:
                _LOGGER.exception("filter_failed", extra={"chain": self.name, "filter": repr(fn)})
                continue
            if result is None:
                _LOGGER.warning("filter_returned_none", extra={"chain": self.name, "filter": repr(fn)})
                continue
            value = result
        return value
