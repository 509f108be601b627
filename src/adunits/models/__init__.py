"""Boundary models: page facts in, export payload and client assets out."""

from .export import ClientAssets, ExportPayload, ScriptAsset, StyleAsset
from .page_context import PageContext
from .placement import PlacementOptions

__all__ = [
    "ClientAssets",
    "ExportPayload",
    "PageContext",
    "PlacementOptions",
    "ScriptAsset",
    "StyleAsset",
]
