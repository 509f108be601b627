"""Option store adapters and wiring."""

import json

import pytest

from adunits.adapters.json_option_store import JsonFileOptionStore
from adunits.config.runtime import RuntimeSettings
from adunits.ports.options import InMemoryOptionStore, OptionStore
from adunits.wiring import build_session


def _write_options(tmp_path, options) -> str:
    path = tmp_path / "options.json"
    path.write_text(json.dumps(options), encoding="utf-8")
    return str(path)


def test_stores_satisfy_protocol(tmp_path):
    assert isinstance(InMemoryOptionStore(), OptionStore)
    assert isinstance(JsonFileOptionStore(tmp_path / "missing.json"), OptionStore)


def test_missing_file_is_empty_store(tmp_path):
    store = JsonFileOptionStore(tmp_path / "missing.json")
    assert store.get("dfw_breakpoints") is None
    assert store.get("dfw_network_code", "fallback") == "fallback"


def test_serialized_values_are_decoded(tmp_path):
    stored = [{"identifier": "mobile", "min-width": "0", "max-width": "767"}]
    path = _write_options(tmp_path, {"dfw_breakpoints": json.dumps(stored), "dfw_network_code": "1234"})
    store = JsonFileOptionStore(path)
    assert store.get("dfw_breakpoints") == stored
    assert store.get("dfw_network_code") == "1234"


def test_non_object_file_rejected(tmp_path):
    path = _write_options(tmp_path, ["not", "an", "object"])
    with pytest.raises(ValueError):
        JsonFileOptionStore(path)


def test_build_session_reads_options_file(tmp_path):
    path = _write_options(
        tmp_path,
        {
            "dfw_network_code": "5678",
            "dfw_breakpoints": [
                {"identifier": "mobile", "min-width": 0, "max-width": 767},
                {"identifier": "broken", "max-width": 100},
            ],
        },
    )
    session = build_session(settings=RuntimeSettings(options_path=path, network_code=None))
    assert session.network_code == "5678"
    assert [bp.identifier for bp in session.registry] == ["mobile"]
