"""Summoner repository implementation."""
from typing import TYPE_CHECKING, List

from config import settings
from domain.enums import Region, ResourceKind
from domain.interfaces import ISummonerRepository
from domain.schemas import RiotAccount, RiotMastery, RiotRankEntry, RiotSummoner
from infrastructure.api import RiotAPIClient

if TYPE_CHECKING:
    from application.services import CacheFrontDoor, SchemaValidator


class SummonerRepository(ISummonerRepository):
    """Repository for account, summoner, mastery and league data.

    Each call goes cache -> Riot API -> schema validation. What is cached is
    the raw body, so a cached payload is validated exactly like a fresh one.
    """

    def __init__(self, api_client: RiotAPIClient, cache: "CacheFrontDoor", validator: "SchemaValidator"):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
            cache: Lookaside cache for raw payloads
            validator: Contract checker for every payload
        """
        self.api_client = api_client
        self.cache = cache
        self.validator = validator

    async def get_account(self, region: Region, game_name: str, tag_line: str) -> RiotAccount:
        key = self.cache.make_key(ResourceKind.ACCOUNT, region.regional_route, game_name.lower(), tag_line.lower())
        payload = await self.cache.get_or_compute(
            key,
            settings.ACCOUNT_TTL_S,
            lambda: self.api_client.get_account_by_riot_id(region, game_name, tag_line),
        )
        return self.validator.require(ResourceKind.ACCOUNT, payload, subject=f"{game_name}#{tag_line}")

    async def get_summoner(self, region: Region, puuid: str) -> RiotSummoner:
        key = self.cache.make_key(ResourceKind.SUMMONER, region.platform_route, puuid)
        payload = await self.cache.get_or_compute(
            key,
            settings.SUMMONER_TTL_S,
            lambda: self.api_client.get_summoner_by_puuid(region, puuid),
        )
        return self.validator.require(ResourceKind.SUMMONER, payload, subject=puuid)

    async def get_masteries(self, region: Region, puuid: str) -> List[RiotMastery]:
        key = self.cache.make_key(ResourceKind.MASTERY_LIST, region.platform_route, puuid)
        payload = await self.cache.get_or_compute(
            key,
            settings.MASTERY_TTL_S,
            lambda: self.api_client.get_masteries_by_puuid(region, puuid),
        )
        return self.validator.require(ResourceKind.MASTERY_LIST, payload, subject=puuid)

    async def get_rank_entries(self, region: Region, summoner_id: str) -> List[RiotRankEntry]:
        key = self.cache.make_key(ResourceKind.RANK_LIST, region.platform_route, summoner_id)
        payload = await self.cache.get_or_compute(
            key,
            settings.RANK_TTL_S,
            lambda: self.api_client.get_league_entries_by_summoner(region, summoner_id),
        )
        return self.validator.require(ResourceKind.RANK_LIST, payload, subject=summoner_id)
