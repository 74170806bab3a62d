"""Structural contracts for upstream payloads."""
from .riot import (
    RiotAccount,
    RiotSummoner,
    RiotMastery,
    RiotRankEntry,
    RiotPerkSelection,
    RiotPerkStyle,
    RiotPerks,
    RiotParticipant,
    RiotBan,
    RiotObjective,
    RiotTeam,
    RiotMatchMetadata,
    RiotMatchInfo,
    RiotMatch,
    RiotChampion,
    RiotChampionCatalog,
    CherryAugment,
)

__all__ = [
    'RiotAccount',
    'RiotSummoner',
    'RiotMastery',
    'RiotRankEntry',
    'RiotPerkSelection',
    'RiotPerkStyle',
    'RiotPerks',
    'RiotParticipant',
    'RiotBan',
    'RiotObjective',
    'RiotTeam',
    'RiotMatchMetadata',
    'RiotMatchInfo',
    'RiotMatch',
    'RiotChampion',
    'RiotChampionCatalog',
    'CherryAugment',
]
