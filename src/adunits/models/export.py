"""Payloads handed to the client-delivery collaborator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ExportPayload(BaseModel):
    """Per-render data for the client display library (localized as ``dfw``)."""

    network_code: str = Field(..., description="Ad server network code")
    mappings: dict[str, list[list[Any]]] = Field(
        default_factory=dict,
        description="Size mapping tables keyed by 'mapping<slot id>'",
    )
    targeting: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Page-level targeting criteria",
    )

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(indent=indent)


class ScriptAsset(BaseModel):
    """A client script reference."""

    handle: str
    src: str
    deps: list[str] = Field(default_factory=list)
    version: str
    in_footer: bool = True


class StyleAsset(BaseModel):
    """A client stylesheet reference."""

    handle: str
    src: str
    version: str
    media: str = "all"


class ClientAssets(BaseModel):
    """Everything the page needs to load once to display ad units."""

    scripts: list[ScriptAsset]
    style: StyleAsset
    data_object: str = Field(default="dfw", description="Global JS name the export payload is bound to")
    data_handle: str = Field(..., description="Script handle the export payload is attached to")
