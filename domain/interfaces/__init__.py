"""Domain interfaces."""
from .cache import CacheHit, ICacheStore
from .repository import IMatchRepository, ISummonerRepository

__all__ = [
    'CacheHit',
    'ICacheStore',
    'IMatchRepository',
    'ISummonerRepository',
]
