"""CLI smoke tests against a temporary options file."""

import json
import sys

import pytest

from adunits.config.runtime import get_settings
from adunits.interface import cli


@pytest.fixture
def options_file(tmp_path, monkeypatch):
    path = tmp_path / "options.json"
    path.write_text(
        json.dumps(
            {
                "dfw_network_code": "4321",
                "dfw_breakpoints": [{"identifier": "mobile", "min-width": 0, "max-width": 767}],
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("ADUNITS_OPTIONS_PATH", str(path))
    monkeypatch.delenv("ADUNITS_NETWORK_CODE", raising=False)
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["adunits", *argv])
    cli.main()


def test_breakpoints_command(options_file, monkeypatch, capsys):
    _run(monkeypatch, "breakpoints")
    data = json.loads(capsys.readouterr().out)
    assert [bp["identifier"] for bp in data] == ["mobile"]


def test_place_command(options_file, monkeypatch, capsys):
    _run(monkeypatch, "place", "/4321/top", "300x250", "--lazy-load")
    out = capsys.readouterr().out.strip()
    assert out == '<div class="dfw-unit dfw-lazy-load" data-adunit="/4321/top" data-dimensions="300x250"></div>'


def test_place_command_rejects_bad_sizes(options_file, monkeypatch):
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "place", "/4321/top", "enormous")
    assert exc_info.value.code == 1


def test_render_command(options_file, tmp_path, monkeypatch, capsys):
    placements = tmp_path / "placements.json"
    placements.write_text(json.dumps([{"identifier": "/4321/top", "sizes": {"mobile": [[320, 50]]}}]))
    page = tmp_path / "page.json"
    page.write_text(json.dumps({"is_single": True, "categories": ["news"]}))
    _run(monkeypatch, "render", "--placements", str(placements), "--page", str(page))
    data = json.loads(capsys.readouterr().out)
    assert data["export"] == {
        "network_code": "4321",
        "mappings": {"mapping1": [[[0, 767], [[320, 50]]]]},
        "targeting": {"Page": ["single"], "Category": ["news"]},
    }


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_unreadable_options_file_exits_cleanly(options_file, monkeypatch, capsys, content):
    options_file.write_text(content, encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        _run(monkeypatch, "breakpoints")
    assert exc_info.value.code == 1
    assert "cannot load options file" in capsys.readouterr().err
