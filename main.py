"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str] | None = None) -> int:
    bootstrap_logging(
        service="starcraft",
        level=settings.LOG_LEVEL,
        log_dir=settings.log_dir(),
        log_file_name="starcraft.jsonl",
    )
    # Lazy import keeps logging configured before any module-level logger use
    from presentation.cli import QueryCommand

    try:
        return asyncio.run(QueryCommand().run(sys.argv[1:] if argv is None else argv))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
