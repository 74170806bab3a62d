"""Cache store implementations."""
from .memory_store import MemoryCacheStore
from .sqlite_store import SQLiteCacheStore

__all__ = [
    'MemoryCacheStore',
    'SQLiteCacheStore',
]
