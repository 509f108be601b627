"""Breakpoint registry: named viewport width ranges."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator

from ..observability import get_logger
from .errors import InvalidIdentifier, MalformedConfigEntry

_LOGGER = get_logger("breakpoints")

# Stored max-width values meaning "no upper bound".
_UNBOUNDED_VALUES = frozenset({"", "unbounded", "none"})


@dataclass(frozen=True)
class Breakpoint:
    """A named viewport range. ``max_width`` of None means unbounded."""

    identifier: str
    min_width: int = 0
    max_width: int | None = None
    from_config: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.min_width < 0:
            raise ValueError(f"min_width must be >= 0, got {self.min_width}")
        if self.max_width is not None and self.max_width <= self.min_width:
            raise ValueError(
                f"max_width must be greater than min_width ({self.max_width} <= {self.min_width})"
            )

    @property
    def width_range(self) -> list[int | None]:
        return [self.min_width, self.max_width]


@dataclass(frozen=True)
class SimpleIdentifier:
    """A plain identifier string."""

    value: str


@dataclass(frozen=True)
class StructuredIdentifier:
    """A structured registration request carrying an ``identifier`` field."""

    value: str
    fields: Mapping[str, Any]


IdentifierRequest = Union[SimpleIdentifier, StructuredIdentifier]


def resolve_identifier(raw: Any) -> IdentifierRequest:
    """Classify a raw identifier argument.

    Accepts a non-empty string, a mapping with a non-empty string
    ``identifier`` key, or an already-resolved request. Anything else
    raises InvalidIdentifier.
    """
    if isinstance(raw, (SimpleIdentifier, StructuredIdentifier)):
        return raw
    if isinstance(raw, str):
        if not raw.strip():
            raise InvalidIdentifier("identifier must be a non-empty string")
        return SimpleIdentifier(raw)
    if isinstance(raw, Mapping):
        value = raw.get("identifier")
        if not isinstance(value, str) or not value.strip():
            raise InvalidIdentifier("structured request has no usable 'identifier' field")
        return StructuredIdentifier(value=value, fields=dict(raw))
    raise InvalidIdentifier(f"unsupported identifier type {type(raw).__name__}")


def _field(fields: Mapping[str, Any], name: str) -> Any:
    """Look up a width field under its stored (hyphenated) or Python name."""
    if name in fields:
        return fields[name]
    return fields.get(name.replace("_", "-"))


def _normalize_max_width(value: Any) -> Any:
    """Map the stored spellings of an unbounded maximum to None."""
    if isinstance(value, str) and value.strip().lower() in _UNBOUNDED_VALUES:
        return None
    return value


class StoredBreakpoint(BaseModel):
    """One entry of the persisted ``dfw_breakpoints`` option."""

    identifier: str = Field(..., min_length=1, description="Breakpoint identifier")
    min_width: int = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("min-width", "min_width"),
        description="Minimum viewport width in pixels",
    )
    max_width: int | None = Field(
        ...,
        validation_alias=AliasChoices("max-width", "max_width"),
        description="Maximum viewport width in pixels; null for unbounded",
    )

    @field_validator("identifier")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("identifier must not be blank")
        return v

    @field_validator("max_width", mode="before")
    @classmethod
    def _unbounded(cls, v: Any) -> Any:
        return _normalize_max_width(v)

    @model_validator(mode="after")
    def _check_range(self) -> "StoredBreakpoint":
        if self.max_width is not None and self.max_width <= self.min_width:
            raise ValueError("max-width must be greater than min-width")
        return self


class BreakpointRegistry:
    """Request-scoped set of breakpoints keyed by identifier.

    Registration is last-write-wins so code registration can be layered
    on top of the persisted configuration.
    """

    def __init__(self) -> None:
        self._breakpoints: dict[str, Breakpoint] = {}
        self._revision = 0

    def register(
        self,
        identifier: Any,
        min_width: int | None = None,
        max_width: int | None = None,
        from_config: bool = False,
    ) -> bool:
        """Insert or overwrite a breakpoint. Returns False and leaves the registry untouched on bad input."""
        try:
            request = resolve_identifier(identifier)
        except InvalidIdentifier as exc:
            _LOGGER.warning("breakpoint_rejected", extra={"reason": str(exc)})
            return False

        if isinstance(request, StructuredIdentifier):
            if min_width is None:
                min_width = _field(request.fields, "min_width")
            if max_width is None:
                max_width = _normalize_max_width(_field(request.fields, "max_width"))

        try:
            breakpoint = Breakpoint(
                identifier=request.value,
                min_width=int(min_width) if min_width is not None else 0,
                max_width=int(max_width) if max_width is not None else None,
                from_config=from_config,
            )
        except (TypeError, ValueError) as exc:
            _LOGGER.warning(
                "breakpoint_rejected",
                extra={"identifier": request.value, "reason": str(exc)},
            )
            return False

        if request.value in self._breakpoints:
            _LOGGER.debug("breakpoint_overwritten", extra={"identifier": request.value})
        self._breakpoints[request.value] = breakpoint
        self._revision += 1
        return True

    def load_from_config(self, stored_breakpoints: Iterable[Any] | None) -> int:
        """Register every well-formed stored entry; skip the rest. Returns the count registered."""
        if not stored_breakpoints:
            return 0
        if isinstance(stored_breakpoints, (str, bytes, Mapping)):
            _LOGGER.warning(
                "stored_breakpoints_ignored",
                extra={"reason": f"expected a list, got {type(stored_breakpoints).__name__}"},
            )
            return 0

        loaded = 0
        for index, entry in enumerate(stored_breakpoints):
            try:
                stored = _parse_stored(index, entry)
            except MalformedConfigEntry as exc:
                _LOGGER.warning("stored_breakpoint_skipped", extra={"index": exc.index, "reason": exc.reason})
                continue
            if self.register(
                stored.identifier,
                stored.min_width,
                stored.max_width,
                from_config=True,
            ):
                loaded += 1
        return loaded

    def get(self, identifier: str) -> Breakpoint | None:
        return self._breakpoints.get(identifier)

    @property
    def revision(self) -> int:
        """Incremented on every successful registration."""
        return self._revision

    def to_list(self) -> list[dict[str, Any]]:
        return [
            {
                "identifier": bp.identifier,
                "min_width": bp.min_width,
                "max_width": bp.max_width,
                "from_config": bp.from_config,
            }
            for bp in self._breakpoints.values()
        ]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._breakpoints

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self._breakpoints.values())

    def __len__(self) -> int:
        return len(self._breakpoints)


def _parse_stored(index: int, entry: Any) -> StoredBreakpoint:
    if not isinstance(entry, Mapping):
        raise MalformedConfigEntry(index, f"expected an object, got {type(entry).__name__}")
    try:
        return StoredBreakpoint.model_validate(dict(entry))
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "entry" for err in exc.errors())
        raise MalformedConfigEntry(index, f"invalid fields: {fields}") from exc
