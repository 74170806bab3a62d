"""Process-local cache store."""
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from domain.interfaces import CacheHit, ICacheStore


@dataclass(slots=True)
class _Entry:
    value: Any
    written_at: float


class MemoryCacheStore(ICacheStore):
    """Dict-backed store; entries live until overwritten or the process exits."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._entries: Dict[str, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> Optional[CacheHit]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        return CacheHit(value=entry.value, age_s=max(0.0, self._clock() - entry.written_at))

    async def set(self, key: str, value: Any) -> None:
        self._entries[key] = _Entry(value=value, written_at=self._clock())
