from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "starcraft",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "starcraft.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    Console output is off unless LOG_CONSOLE=true; the CLI prints its own
    results to stdout and keeps log noise on stderr. When ``log_dir`` is
    given, JSON lines go to a rotating file through a queue listener.
    """
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler(sys.stderr)
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter(color=sys.stderr.isatty()))
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())

    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger("httpcore").setLevel(max(lvl, logging.WARNING))


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
