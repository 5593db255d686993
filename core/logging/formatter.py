from __future__ import annotations

import json
import logging
import time
from typing import Any, Dict

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"

# Keys a caller may pass through ``extra=`` that are rendered as fields.
_EXTRA_FIELDS = ("path", "method", "page", "status", "attempt", "delay_s", "cache_key")


def _record_metadata(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime(record.created)),
        "level": record.levelname,
        "service": getattr(record, "service", None),
        "logger": record.name,
        "function": record.funcName,
        "line_number": record.lineno,
    }


def _record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields = {k: getattr(record, k) for k in _EXTRA_FIELDS if getattr(record, k, None) is not None}
    ctx = getattr(record, "context", None)
    if ctx:
        fields = {**ctx, **fields}
    return fields


class ConsoleFormatter(logging.Formatter):
    def __init__(self, *, color: bool = True) -> None:
        super().__init__()
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        md = _record_metadata(record)
        lvl = record.levelname
        parts = [
            md["timestamp"],
            f"{lvl:<7}",
            md["service"] or "-",
            f"{md['logger']}:{md['line_number']}",
            record.getMessage(),
        ]
        fields = _record_fields(record)
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))
        if record.exc_info:
            parts.append(self.formatException(record.exc_info))
        line = " | ".join(parts)
        if not self._color:
            return line
        return f"{_LEVEL_COLORS.get(lvl, '')}{line}{_RESET}"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = _record_metadata(record)
        payload["message"] = record.getMessage()
        fields = _record_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
