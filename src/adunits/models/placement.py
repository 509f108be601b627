"""Placement request options."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class PlacementOptions(BaseModel):
    """Rendering options for a single ad placement."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    lazy_load: bool = Field(
        default=False,
        validation_alias=AliasChoices("lazy_load", "lazyLoad"),
        description="Leave the unit for the client to load on demand",
    )
