"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings


def main(argv: list[str]) -> int:
    bootstrap_logging(
        service="stats",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="stats.jsonl",
    )
    try:
        # Lazy import so logging is configured before any module logger is used
        from presentation.cli import run as run_command
        return asyncio.run(run_command(argv))
    finally:
        shutdown_logging()


def run() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(run())
