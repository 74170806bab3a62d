"""Infrastructure layer - API client, cache stores, repositories and static data."""
from .api import RiotAPIClient, RateLimiter, EndpointRateLimiter
from .cache import MemoryCacheStore, SQLiteCacheStore
from .repositories import MatchRepository, SummonerRepository
from .static import load_augment_catalog, write_augment_snapshot

__all__ = [
    'RiotAPIClient',
    'RateLimiter',
    'EndpointRateLimiter',
    'MemoryCacheStore',
    'SQLiteCacheStore',
    'MatchRepository',
    'SummonerRepository',
    'load_augment_catalog',
    'write_augment_snapshot',
]
