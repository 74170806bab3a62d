from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import get_context
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None

# Libraries that log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore")


class _ServiceFilter(logging.Filter):
    """Stamps the service name and the bound context on records before they leave the task."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "service", None) is None:
            record.service = self.service
        if not hasattr(record, "context"):
            record.context = get_context()
        return True


def bootstrap_logging(
    *,
    service: str = "stats",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "stats.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    service_filter = _ServiceFilter(service)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    enable_console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    if enable_console:
        console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
        console = logging.StreamHandler()
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter())
        console.addFilter(service_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(service_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
