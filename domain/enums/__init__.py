"""Domain enumerations."""
from .region import Region
from .queue_type import RankedQueue, MatchTypeFilter
from .game_queue import GameQueue
from .role import Role
from .resource_kind import ResourceKind

__all__ = [
    'Region',
    'RankedQueue',
    'MatchTypeFilter',
    'GameQueue',
    'Role',
    'ResourceKind',
]
