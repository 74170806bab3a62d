"""SQLite-backed cache store so cached payloads survive restarts."""
import asyncio
import json
import sqlite3
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator, Optional

from core.logging.logger import get_logger
from domain.interfaces import CacheHit, ICacheStore


class SQLiteCacheStore(ICacheStore):
    """One row per key holding the JSON body and its write time.

    Calls run on a worker thread; each call opens its own connection so the
    store can be shared by concurrent tasks.
    """

    def __init__(self, db_path: Path, clock: Callable[[], float] = time.time) -> None:
        self.db_path = db_path
        self._clock = clock
        self.log = get_logger(__name__, service="cache")
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(
                "CREATE TABLE IF NOT EXISTS riot_cache ("
                "cache_key TEXT PRIMARY KEY, payload TEXT NOT NULL, written_at REAL NOT NULL)"
            )

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(str(self.db_path), timeout=5.0)
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _get_sync(self, key: str) -> Optional[CacheHit]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT payload, written_at FROM riot_cache WHERE cache_key = ?", (key,)
            ).fetchone()
        if row is None:
            return None
        payload, written_at = row
        return CacheHit(value=json.loads(payload), age_s=max(0.0, self._clock() - written_at))

    def _set_sync(self, key: str, value: Any) -> None:
        body = json.dumps(value, separators=(",", ":"))
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO riot_cache (cache_key, payload, written_at) VALUES (?, ?, ?) "
                "ON CONFLICT(cache_key) DO UPDATE SET payload = excluded.payload, written_at = excluded.written_at",
                (key, body, self._clock()),
            )

    async def get(self, key: str) -> Optional[CacheHit]:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: Any) -> None:
        await asyncio.to_thread(self._set_sync, key, value)

    def purge_older_than(self, max_age_s: float) -> int:
        """Delete entries older than ``max_age_s``; returns the number removed."""
        cutoff = self._clock() - max_age_s
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM riot_cache WHERE written_at < ?", (cutoff,))
            removed = cur.rowcount
        self.log.info(lambda: f"cache-purge removed={removed}")
        return removed
