"""Riot API payload contracts.

Field names mirror the wire format so validation errors point at the
upstream path. Only the fields this project reads are declared; anything
else the provider adds is ignored. Validation is strict: a number sent as a
string is a violation, never coerced.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class RiotModel(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


# ── account-v1 / summoner-v4 ───────────────────────────────────────────


class RiotAccount(RiotModel):
    puuid: str
    gameName: str
    tagLine: str


class RiotSummoner(RiotModel):
    id: str
    puuid: str
    profileIconId: int
    summonerLevel: int


# ── champion-mastery-v4 / league-v4 ────────────────────────────────────


class RiotMastery(RiotModel):
    championId: int
    championLevel: int
    championPoints: int


class RiotRankEntry(RiotModel):
    queueType: str
    tier: Optional[str] = None
    rank: Optional[str] = None
    leaguePoints: int
    wins: int
    losses: int


# ── match-v5 ───────────────────────────────────────────────────────────


class RiotPerkSelection(RiotModel):
    perk: int


class RiotPerkStyle(RiotModel):
    description: str
    style: int
    selections: List[RiotPerkSelection]


class RiotPerks(RiotModel):
    styles: List[RiotPerkStyle]


class RiotParticipant(RiotModel):
    puuid: str
    summonerName: Optional[str] = None
    riotIdGameName: Optional[str] = None
    riotIdTagline: Optional[str] = None
    championId: int
    championName: str
    champLevel: int
    teamId: int
    teamPosition: str
    win: bool
    gameEndedInEarlySurrender: bool

    kills: int
    deaths: int
    assists: int
    doubleKills: int
    tripleKills: int
    quadraKills: int
    pentaKills: int
    largestMultiKill: int

    goldEarned: int
    neutralMinionsKilled: int
    totalMinionsKilled: int
    visionScore: int
    totalDamageDealtToChampions: int
    totalDamageTaken: int

    item0: int
    item1: int
    item2: int
    item3: int
    item4: int
    item5: int
    item6: int

    summoner1Id: int
    summoner2Id: int
    perks: RiotPerks

    # Arena only
    playerAugment1: Optional[int] = None
    playerAugment2: Optional[int] = None
    playerAugment3: Optional[int] = None
    playerAugment4: Optional[int] = None
    placement: Optional[int] = None
    subteamPlacement: Optional[int] = None
    playerSubteamId: Optional[int] = None


class RiotBan(RiotModel):
    championId: int
    pickTurn: int


class RiotObjective(RiotModel):
    first: bool
    kills: int


class RiotTeam(RiotModel):
    teamId: int
    win: bool
    bans: List[RiotBan]
    objectives: Dict[str, RiotObjective]


class RiotMatchMetadata(RiotModel):
    matchId: str
    participants: List[str]


class RiotMatchInfo(RiotModel):
    gameCreation: int
    gameDuration: int
    gameMode: str
    queueId: int
    participants: List[RiotParticipant]
    teams: List[RiotTeam]


class RiotMatch(RiotModel):
    metadata: RiotMatchMetadata
    info: RiotMatchInfo


# ── Data Dragon ────────────────────────────────────────────────────────


class RiotChampion(RiotModel):
    id: str
    key: str
    name: str


class RiotChampionCatalog(RiotModel):
    version: str
    data: Dict[str, RiotChampion]


# ── CommunityDragon ────────────────────────────────────────────────────


class CherryAugment(RiotModel):
    """One entry of ``cherry-augments.json``; ``rarity`` is ``kSilver``/``kGold``/``kPrismatic``."""

    id: int
    nameTRA: str
    augmentSmallIconPath: str
    rarity: str
