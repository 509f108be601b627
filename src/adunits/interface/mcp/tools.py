"""Tool registry for the MCP server.

Request shaping via Pydantic; response allowlists (field-level).
Every call builds its own RenderSession so no slot ids or targeting
leak between calls.
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Any

from pydantic import ValidationError

from ...models.page_context import PageContext
from ...observability import log_tool_invocation
from ...services.page_render import render_page

# ---------------------------------------------------------------------------
# Response allowlists (field-level)
# ---------------------------------------------------------------------------
ALLOWED_RENDER_KEYS = frozenset({"markup", "export", "assets", "footer_script"})
ALLOWED_BREAKPOINT_KEYS = frozenset({"identifier", "min_width", "max_width", "from_config"})

ALLOWED_TOOLS = frozenset({"breakpoints_list", "targeting_resolve", "page_render"})

MAX_PLACEMENTS = 100


def _get_session(network_code: str | None = None):
    from ...wiring import build_session
    return build_session(network_code=network_code)


def _shape_render(result: dict[str, Any]) -> dict[str, Any]:
    return {k: result[k] for k in ALLOWED_RENDER_KEYS if k in result}


def _shape_breakpoints(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [{k: item[k] for k in ALLOWED_BREAKPOINT_KEYS if k in item} for item in items]


def _invalid_page(e: ValidationError) -> str:
    return json.dumps({"error": "invalid page facts", "detail": e.errors(include_url=False, include_context=False)})


def list_breakpoints() -> str:
    return json.dumps(_shape_breakpoints(_get_session().registry.to_list()), indent=2)


def resolve_targeting(page: dict[str, Any] | None = None) -> str:
    try:
        context = PageContext.model_validate(page or {})
    except ValidationError as e:
        return _invalid_page(e)
    return json.dumps(_get_session().resolve_targeting(context), indent=2)


def render(
    placements: list[dict[str, Any]],
    page: dict[str, Any] | None = None,
    network_code: str | None = None,
) -> str:
    if len(placements) > MAX_PLACEMENTS:
        return json.dumps({"error": f"too many placements ({len(placements)}; max {MAX_PLACEMENTS})"})
    if not all(isinstance(p, dict) for p in placements):
        return json.dumps({"error": "each placement must be an object"})
    try:
        context = PageContext.model_validate(page or {})
    except ValidationError as e:
        return _invalid_page(e)
    result = render_page(_get_session(network_code), placements, context)
    return json.dumps(_shape_render(result), indent=2)


def register_tools(mcp):
    """Register the ad unit tools with request shaping and response allowlist."""

    @mcp.tool()
    def breakpoints_list() -> str:
        """List the breakpoints loaded from site options.

        Returns:
            JSON list of {identifier, min_width, max_width, from_config}
        """
        t0 = time.monotonic()
        out = list_breakpoints()
        log_tool_invocation("breakpoints_list", str(uuid.uuid4()), (time.monotonic() - t0) * 1000)
        return out

    @mcp.tool()
    def targeting_resolve(page: dict[str, Any] | None = None) -> str:
        """Resolve key/value targeting criteria for a page.

        Args:
            page: Page facts (is_home, is_single, categories, tags, queried_category, ...)

        Returns:
            JSON object mapping criterion key (Page, Category, Tag) to values
        """
        t0 = time.monotonic()
        out = resolve_targeting(page)
        log_tool_invocation("targeting_resolve", str(uuid.uuid4()), (time.monotonic() - t0) * 1000)
        return out

    @mcp.tool()
    def page_render(
        placements: list[dict[str, Any]],
        page: dict[str, Any] | None = None,
        network_code: str | None = None,
    ) -> str:
        """Render ad unit markup for a page and the payload for the client library.

        Args:
            placements: List of {identifier, sizes, options} (max 100); sizes is a
                [w, h] pair, a list of pairs, a "300x250" string, or {breakpoint: sizes}
            page: Page facts used for targeting
            network_code: Override the configured network code

        Returns:
            JSON with markup (one entry per placement), export, assets, footer_script
        """
        t0 = time.monotonic()
        out = render(placements, page, network_code)
        log_tool_invocation(
            "page_render",
            str(uuid.uuid4()),
            (time.monotonic() - t0) * 1000,
            extra={"placements_count": len(placements)},
        )
        return out
