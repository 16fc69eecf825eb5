"""Structured logging: JSON line records for itinerary events."""

from __future__ import annotations

import json
import logging
import sys
import time
import uuid
from typing import Any, Optional, TextIO

_fallback_logger = logging.getLogger("trip-builder.logging")


class StructuredLogger:
    """Emit one JSON object per line, tagged with a trace id."""

    def __init__(self, trace_id: Optional[str] = None, output: Optional[TextIO] = None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            out = self._output if self._output is not None else sys.stderr
            out.write(line + "\n")
            out.flush()
        except (OSError, ValueError) as exc:
            _fallback_logger.error("structured log write failed: %s", exc)

    def start(self, operation: str, **extra: Any) -> None:
        self._timers[operation] = time.time()
        self._emit({"event": "start", "operation": operation, **extra})

    def end(self, operation: str, **extra: Any) -> None:
        started = self._timers.pop(operation, time.time())
        duration_ms = round((time.time() - started) * 1000, 1)
        self._emit({"event": "end", "operation": operation, "duration_ms": duration_ms, **extra})

    def event(self, name: str, **extra: Any) -> None:
        self._emit({"event": name, **extra})

    def warning(self, operation: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "operation": operation, "message": message, **extra})

    def error(self, operation: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "operation": operation, "error": error, **extra})


_logger: Optional[StructuredLogger] = None


def get_logger(trace_id: Optional[str] = None) -> StructuredLogger:
    global _logger
    if _logger is None or (trace_id and _logger.trace_id != trace_id):
        _logger = StructuredLogger(trace_id=trace_id)
    return _logger


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


__all__ = ["StructuredLogger", "configure_logging", "get_logger"]
