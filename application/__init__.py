"""Application layer - Services and use cases."""
from .services import (
    CacheFrontDoor,
    GameNormalizer,
    RankReconciler,
    SchemaValidator,
    StatsAggregator,
    VersionRegistry,
)
from .use_cases import SummonerLookupUseCase

__all__ = [
    'CacheFrontDoor',
    'GameNormalizer',
    'RankReconciler',
    'SchemaValidator',
    'StatsAggregator',
    'VersionRegistry',
    'SummonerLookupUseCase',
]
