"""Application services root exports."""
from .cache_front_door import CacheFrontDoor
from .game_normalizer import GameNormalizer
from .rank_reconciler import RankReconciler
from .schema_validator import SchemaValidator, ValidationResult
from .stats_aggregator import StatsAggregator
from .version_registry import VersionRegistry

__all__ = [
    "CacheFrontDoor",
    "GameNormalizer",
    "RankReconciler",
    "SchemaValidator",
    "ValidationResult",
    "StatsAggregator",
    "VersionRegistry",
]
