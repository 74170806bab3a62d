"""Domain entities."""
from .catalog import Augment, AugmentCatalog
from .game import (
    ArenaExtension,
    Game,
    GameExtension,
    NormalizedBatch,
    RosterEntry,
    RunePerks,
    SkippedMatch,
    StandardExtension,
)
from .game_detail import Ban, DetailParticipant, GameDetail, MultiKill, ObjectiveOutcome, TeamDetail
from .rank import UNRANKED, RankSlot, ReconciledRank
from .stats import ChampStats, Friend, PlayerStats, PositionStats
from .summoner import Mastery, PlayerProfile
from .version_table import VersionTable

__all__ = [
    'Augment',
    'AugmentCatalog',
    'ArenaExtension',
    'Game',
    'GameExtension',
    'NormalizedBatch',
    'RosterEntry',
    'RunePerks',
    'SkippedMatch',
    'StandardExtension',
    'Ban',
    'DetailParticipant',
    'GameDetail',
    'MultiKill',
    'ObjectiveOutcome',
    'TeamDetail',
    'UNRANKED',
    'RankSlot',
    'ReconciledRank',
    'ChampStats',
    'Friend',
    'PlayerStats',
    'PositionStats',
    'Mastery',
    'PlayerProfile',
    'VersionTable',
]
