"""JSON file adapter for OptionStore."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..observability import get_logger

_LOGGER = get_logger("options")


class JsonFileOptionStore:
    """Site options read once from a JSON object file.

    A missing file is an empty store. String values that hold JSON
    arrays or objects are decoded on read, the way serialized option
    values are stored by the host.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._options = self._read()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            _LOGGER.debug("options_file_missing", extra={"path": str(self.path)})
            return {}
        with open(self.path, encoding="utf-8") as f:
            raw = json.load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"options file {self.path} must contain a JSON object")
        return raw

    def get(self, name: str, default: Any = None) -> Any:
        value = self._options.get(name, default)
        if isinstance(value, str) and value.lstrip()[:1] in ("[", "{"):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value
        return value
