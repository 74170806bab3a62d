"""Match repository implementation."""
import asyncio
from typing import TYPE_CHECKING, List, Optional, Sequence

from config import settings
from core.logging.logger import get_logger
from domain.enums import MatchTypeFilter, Region, ResourceKind
from domain.errors import ValidationFailure, ValidationIssue
from domain.interfaces import IMatchRepository
from domain.schemas import RiotMatch
from infrastructure.api import RiotAPIClient

if TYPE_CHECKING:
    from application.services import CacheFrontDoor, SchemaValidator

logger = get_logger(__name__, service="matches")


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient, cache: "CacheFrontDoor", validator: "SchemaValidator"):
        self.api_client = api_client
        self.cache = cache
        self.validator = validator

    async def get_match_ids(
        self,
        region: Region,
        puuid: str,
        start: int = 0,
        count: int = 20,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> List[str]:
        key = self.cache.make_key(
            ResourceKind.MATCH_IDS, region.regional_route, puuid, match_type.value, start, count
        )
        payload = await self.cache.get_or_compute(
            key,
            settings.MATCH_IDS_TTL_S,
            lambda: self.api_client.get_match_ids_by_puuid(region, puuid, start, count, match_type),
        )
        return self.validator.require(ResourceKind.MATCH_IDS, payload, subject=puuid)

    async def get_latest_match_id(self, region: Region, puuid: str) -> Optional[str]:
        """Most recent match id straight from the API; never served from the cache."""
        payload = await self.api_client.get_match_ids_by_puuid(region, puuid, 0, 1)
        ids = self.validator.require(ResourceKind.MATCH_IDS, payload, subject=puuid)
        return ids[0] if ids else None

    async def _fetch_match(self, region: Region, match_id: str) -> object:
        key = self.cache.make_key(ResourceKind.MATCH, region.regional_route, match_id)
        return await self.cache.get_or_compute(
            key,
            settings.MATCH_TTL_S,
            lambda: self.api_client.get_match_by_id(region, match_id),
        )

    async def get_match(self, region: Region, match_id: str) -> RiotMatch:
        payload = await self._fetch_match(region, match_id)
        return self.validator.require(ResourceKind.MATCH, payload, subject=match_id)

    async def get_matches(self, region: Region, match_ids: Sequence[str]) -> List[RiotMatch]:
        """
        Fetch every match concurrently, then validate the whole batch.

        The first failed fetch fails the batch. Validation issues of all
        matches are reported together, each path prefixed with its match id.

        Returns:
            Matches in the order of ``match_ids``
        """
        payloads = await asyncio.gather(*(self._fetch_match(region, mid) for mid in match_ids))

        matches: List[RiotMatch] = []
        issues: List[ValidationIssue] = []
        for match_id, payload in zip(match_ids, payloads):
            result = self.validator.validate(ResourceKind.MATCH, payload)
            if result.ok:
                matches.append(result.value)
                continue
            for issue in result.issues:
                logger.error(
                    lambda: f"contract-violation match {match_id} {issue}",
                    extra={"resource": ResourceKind.MATCH.value, "subject": match_id, "path": issue.path},
                )
                issues.append(ValidationIssue(f"{match_id}:{issue.path}", issue.reason))

        if issues:
            raise ValidationFailure(ResourceKind.MATCH.value, issues)
        logger.debug(lambda: f"match-batch ok size={len(matches)}")
        return matches
