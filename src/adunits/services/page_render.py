"""Render every placement of a page and assemble the client hand-off."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..models.page_context import PageContext
from .render_session import RenderSession


def render_page(
    session: RenderSession,
    placements: Iterable[Mapping[str, Any]],
    page: PageContext,
) -> dict[str, Any]:
    """Place each ``{identifier, sizes, options}`` item, then export once.

    Rejected placements yield an empty markup string in their position.
    """
    markup = [
        session.place(item.get("identifier"), item.get("sizes"), item.get("options"))
        for item in placements
    ]
    assets = session.enqueue_assets()
    payload = session.export(page)
    return {
        "markup": markup,
        "export": payload.model_dump(),
        "assets": assets.model_dump() if assets else None,
        "footer_script": session.footer_script(page),
    }
