"""Cache store contract consumed by the cache front door."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CacheHit:
    value: Any
    age_s: float  # seconds since the entry was written


class ICacheStore(ABC):
    """Key-value store that remembers when each entry was written.

    Values are JSON-compatible (raw upstream payloads).
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[CacheHit]:
        """Return the entry and its age, or None on a miss."""
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` stamped with the current time."""
        pass
