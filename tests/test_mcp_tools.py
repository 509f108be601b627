"""MCP surface tests: registered tool set and tool payloads."""

import json

import pytest

from adunits.config.runtime import RuntimeSettings
from adunits.interface.mcp import tools
from adunits.interface.mcp.server import create_server
from adunits.ports.options import InMemoryOptionStore
from adunits.services.render_session import RenderSession


def _get_tool_names(server) -> set[str]:
    """Extract registered tool names from a FastMCP server."""
    # FastMCP stores tools in _tool_manager._tools dict
    return set(server._tool_manager._tools.keys())


@pytest.fixture
def fake_session(monkeypatch):
    def _build(network_code=None):
        store = InMemoryOptionStore(
            {"dfw_breakpoints": [{"identifier": "mobile", "min-width": 0, "max-width": 767}]}
        )
        settings = RuntimeSettings(options_path="/nonexistent/options.json", network_code="1234")
        return RenderSession(network_code=network_code, option_store=store, settings=settings)

    monkeypatch.setattr(tools, "_get_session", _build)


def test_server_exposes_exactly_the_allowed_tools():
    assert _get_tool_names(create_server()) == tools.ALLOWED_TOOLS


def test_breakpoints_list(fake_session):
    data = json.loads(tools.list_breakpoints())
    assert data == [{"identifier": "mobile", "min_width": 0, "max_width": 767, "from_config": True}]


def test_targeting_resolve(fake_session):
    data = json.loads(tools.resolve_targeting({"is_tag": True, "queried_tag": "budget"}))
    assert data == {"Page": [], "Tag": ["budget"]}


def test_targeting_resolve_rejects_bad_facts(fake_session):
    data = json.loads(tools.resolve_targeting({"categories": "not-a-list"}))
    assert data["error"] == "invalid page facts"


def test_page_render(fake_session):
    data = json.loads(
        tools.render(
            [{"identifier": "/1234/top", "sizes": {"mobile": [[320, 50]], "desktop": [[728, 90]]}}],
            {"is_front_page": True},
            network_code="9999",
        )
    )
    assert set(data) == tools.ALLOWED_RENDER_KEYS
    assert data["export"] == {
        "network_code": "9999",
        "mappings": {"mapping1": [[[0, 767], [[320, 50]]]]},
        "targeting": {"Page": ["front-page"]},
    }
    assert 'data-size-mapping="mapping1"' in data["markup"][0]


def test_page_render_limits_placements(fake_session):
    data = json.loads(tools.render([{"identifier": "/x", "sizes": [1, 1]}] * (tools.MAX_PLACEMENTS + 1)))
    assert "error" in data
