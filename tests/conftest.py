"""Shared fixtures: raw Riot payload builders and wired-up services."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Sequence

import pytest

from application.services import GameNormalizer
from domain.entities import Augment, AugmentCatalog, VersionTable

DDRAGON = "https://ddragon.test"
CDRAGON = "https://cdragon.test/latest"

CHAMPIONS = {
    266: "Aatrox",
    103: "Ahri",
    84: "Akali",
    12: "Alistar",
    32: "Amumu",
    9: "FiddleSticks",
    62: "MonkeyKing",
    222: "Jinx",
    412: "Thresh",
    64: "LeeSin",
}

_POSITIONS = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]


def make_participant(index: int, **overrides: Any) -> Dict[str, Any]:
    """One ``info.participants`` entry as match-v5 returns it."""
    champion_id, champion_name = list(CHAMPIONS.items())[index % len(CHAMPIONS)]
    participant = {
        "puuid": f"puuid-{index}",
        "summonerName": f"Summoner{index}",
        "riotIdGameName": f"Player{index}",
        "riotIdTagline": "EUW",
        "championId": champion_id,
        "championName": champion_name,
        "champLevel": 16,
        "teamId": 100 if index < 5 else 200,
        "teamPosition": _POSITIONS[index % 5],
        "win": index < 5,
        "gameEndedInEarlySurrender": False,
        "kills": 2,
        "deaths": 3,
        "assists": 4,
        "doubleKills": 1,
        "tripleKills": 0,
        "quadraKills": 0,
        "pentaKills": 0,
        "largestMultiKill": 2,
        "goldEarned": 11000,
        "neutralMinionsKilled": 10,
        "totalMinionsKilled": 150,
        "visionScore": 20,
        "totalDamageDealtToChampions": 18000,
        "totalDamageTaken": 22000,
        "item0": 3078,
        "item1": 3047,
        "item2": 6333,
        "item3": 0,
        "item4": 0,
        "item5": 0,
        "item6": 3340,
        "summoner1Id": 4,
        "summoner2Id": 12,
        "perks": {
            "styles": [
                {"description": "primaryStyle", "style": 8000, "selections": [{"perk": 8010}, {"perk": 9111}]},
                {"description": "subStyle", "style": 8400, "selections": [{"perk": 8444}]},
            ]
        },
    }
    participant.update(overrides)
    return participant


def make_team(team_id: int, win: bool, bans: Optional[Sequence[int]] = None) -> Dict[str, Any]:
    ban_ids = list(bans) if bans is not None else [103, -1]
    return {
        "teamId": team_id,
        "win": win,
        "bans": [{"championId": cid, "pickTurn": turn} for turn, cid in enumerate(ban_ids, start=1)],
        "objectives": {
            "baron": {"first": win, "kills": 1 if win else 0},
            "dragon": {"first": not win, "kills": 2},
            "tower": {"first": win, "kills": 7 if win else 3},
        },
    }


def make_match(
    match_id: str = "EUW1_7000000001",
    queue_id: int = 420,
    participants: Optional[List[Dict[str, Any]]] = None,
    game_duration: int = 1800,
) -> Dict[str, Any]:
    """A full match-v5 payload; participants default to ten standard players."""
    if participants is None:
        participants = [make_participant(i) for i in range(10)]
    return {
        "metadata": {
            "matchId": match_id,
            "participants": [p["puuid"] for p in participants],
        },
        "info": {
            "gameCreation": 1718000000000,
            "gameDuration": game_duration,
            "gameMode": "CHERRY" if queue_id == 1700 else "CLASSIC",
            "queueId": queue_id,
            "participants": participants,
            "teams": [make_team(100, True), make_team(200, False)],
        },
    }


def make_arena_match(
    match_id: str = "EUW1_7000000099",
    placements: Sequence[int] = (3, 1, 4, 1, 5, 9, 2, 6, 5, 3),
    augments: Sequence[int] = (1, 7, 0, 0),
) -> Dict[str, Any]:
    participants = []
    for i, placement in enumerate(placements):
        participants.append(make_participant(
            i,
            teamPosition="",
            placement=placement,
            subteamPlacement=(placement + 1) // 2,
            playerSubteamId=i // 2 + 1,
            playerAugment1=augments[0],
            playerAugment2=augments[1],
            playerAugment3=augments[2],
            playerAugment4=augments[3],
            perks={"styles": []},
        ))
    match = make_match(match_id=match_id, queue_id=1700, participants=participants)
    match["info"]["teams"] = [make_team(100, True, bans=[]), make_team(200, False, bans=[])]
    return match


def make_account(puuid: str = "puuid-0") -> Dict[str, Any]:
    return {"puuid": puuid, "gameName": "Player0", "tagLine": "EUW"}


def make_summoner(puuid: str = "puuid-0") -> Dict[str, Any]:
    return {"id": "summoner-0", "puuid": puuid, "profileIconId": 4568, "summonerLevel": 312}


def make_champion_catalog(version: str = "14.12.1") -> Dict[str, Any]:
    return {
        "type": "champion",
        "version": version,
        "data": {
            name: {"id": name, "key": str(key), "name": name, "title": "", "tags": []}
            for key, name in CHAMPIONS.items()
        },
    }


def clone(payload: Dict[str, Any]) -> Dict[str, Any]:
    return copy.deepcopy(payload)


@pytest.fixture
def versions() -> VersionTable:
    return VersionTable(version="14.12.1", champions=CHAMPIONS, ddragon_url=DDRAGON)


@pytest.fixture
def augments() -> AugmentCatalog:
    return AugmentCatalog([
        Augment(1, "Get Excited!", "silver", f"{CDRAGON}/getexcited_large.png"),
        Augment(7, "Deft", "silver", f"{CDRAGON}/deft_large.png"),
        Augment(11, "Infernal Soul", "prismatic", f"{CDRAGON}/infernalsoul_large.png"),
    ])


@pytest.fixture
def normalizer(versions: VersionTable, augments: AugmentCatalog) -> GameNormalizer:
    return GameNormalizer(
        versions,
        augments,
        arena_queue_id=1700,
        default_ward_id=2052,
        community_dragon_url=CDRAGON,
    )
