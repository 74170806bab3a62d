"""Domain layer - Entities, enums, upstream contracts, errors and interfaces."""
from .entities import Game, GameDetail, Mastery, PlayerProfile, ReconciledRank, VersionTable
from .enums import Region, RankedQueue, MatchTypeFilter, GameQueue, Role, ResourceKind
from .interfaces import ICacheStore, IMatchRepository, ISummonerRepository

__all__ = [
    # Entities
    'Game',
    'GameDetail',
    'Mastery',
    'PlayerProfile',
    'ReconciledRank',
    'VersionTable',
    # Enums
    'Region',
    'RankedQueue',
    'MatchTypeFilter',
    'GameQueue',
    'Role',
    'ResourceKind',
    # Interfaces
    'ICacheStore',
    'IMatchRepository',
    'ISummonerRepository',
]
