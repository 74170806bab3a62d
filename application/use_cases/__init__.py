"""Application use cases."""
from .summoner_lookup import SummonerLookupUseCase

__all__ = [
    'SummonerLookupUseCase',
]
