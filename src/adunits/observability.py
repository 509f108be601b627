"""Observability: named loggers and structured tool logs (trace_id, tool, latency_ms)."""

from __future__ import annotations

import logging
from typing import Any

_ROOT = "adunits"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_TOOL_LOGGER = logging.getLogger(f"{_ROOT}.mcp")


def get_logger(name: str) -> logging.Logger:
    """Return the ``adunits.<name>`` logger."""
    return logging.getLogger(f"{_ROOT}.{name}")


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    logger = logging.getLogger(_ROOT)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)


def log_tool_invocation(
    tool: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit one structured log line per MCP tool call."""
    payload: dict[str, Any] = {
        "tool": tool,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    if error:
        _TOOL_LOGGER.warning("tool_invocation", extra=payload)
    else:
        _TOOL_LOGGER.info("tool_invocation", extra=payload)
