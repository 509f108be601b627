"""PlacementAssembler: turns a placement request into sanitized markup."""

from __future__ import annotations

from collections.abc import Mapping
from html import escape
from typing import Any

from pydantic import ValidationError

from ..models.placement import PlacementOptions
from ..observability import get_logger
from .errors import InvalidIdentifier
from .sanitizer import PLACEMENT_ALLOWED, sanitize
from .slot_collection import SessionSlotCollection

_LOGGER = get_logger("placement")

UNIT_CLASS = "dfw-unit"
LAZY_LOAD_CLASS = "dfw-lazy-load"


def _options(options: PlacementOptions | Mapping[str, Any] | None) -> PlacementOptions:
    if options is None:
        return PlacementOptions()
    if isinstance(options, PlacementOptions):
        return options
    if not isinstance(options, Mapping):
        _LOGGER.warning("placement_options_ignored", extra={"reason": f"unsupported type {type(options).__name__}"})
        return PlacementOptions()
    try:
        return PlacementOptions.model_validate(dict(options))
    except ValidationError as exc:
        _LOGGER.warning("placement_options_ignored", extra={"reason": str(exc)})
        return PlacementOptions()


def _check_ad_unit(identifier: Any) -> str:
    if not isinstance(identifier, str) or not identifier.strip():
        raise InvalidIdentifier("ad unit identifier must be a non-empty string")
    return identifier.strip()


class PlacementAssembler:
    """Create ad slots in the session collection and render their container."""

    def __init__(self, slots: SessionSlotCollection) -> None:
        self._slots = slots

    def build_placement(
        self,
        identifier: Any,
        sizes: Any,
        options: PlacementOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Return the raw container markup. Raises InvalidIdentifier or ValueError on bad input."""
        ad_unit = _check_ad_unit(identifier)
        opts = _options(options)
        slot = self._slots.create(ad_unit, sizes)

        classes = UNIT_CLASS
        if opts.lazy_load:
            classes += f" {LAZY_LOAD_CLASS}"

        if slot.has_mapping():
            sizing = f'data-size-mapping="{slot.mapping_name}"'
        else:
            sizing = f'data-dimensions="{escape(slot.dimensions(), quote=True)}"'

        return (
            f'<div class="{classes}" data-adunit="{escape(ad_unit, quote=True)}" '
            f"{sizing}></div>"
        )

    def place(
        self,
        identifier: Any,
        sizes: Any,
        options: PlacementOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Return sanitized markup, or an empty string if the request is unusable."""
        try:
            markup = self.build_placement(identifier, sizes, options)
        except InvalidIdentifier as exc:
            _LOGGER.warning("placement_rejected", extra={"reason": str(exc)})
            return ""
        except ValueError as exc:
            _LOGGER.warning("placement_rejected", extra={"ad_unit": identifier, "reason": str(exc)})
            return ""
        return sanitize(markup, PLACEMENT_ALLOWED)
