"""Repository interfaces for upstream data access.

Implementations return payloads that already passed schema validation.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..enums import MatchTypeFilter, Region
from ..schemas import RiotAccount, RiotMastery, RiotMatch, RiotRankEntry, RiotSummoner


class ISummonerRepository(ABC):
    """Interface for account, summoner, mastery and league data."""

    @abstractmethod
    async def get_account(self, region: Region, game_name: str, tag_line: str) -> RiotAccount:
        """Resolve a Riot ID to an account."""
        pass

    @abstractmethod
    async def get_summoner(self, region: Region, puuid: str) -> RiotSummoner:
        """Get summoner profile by PUUID."""
        pass

    @abstractmethod
    async def get_masteries(self, region: Region, puuid: str) -> List[RiotMastery]:
        """Get every champion mastery of a player."""
        pass

    @abstractmethod
    async def get_rank_entries(self, region: Region, summoner_id: str) -> List[RiotRankEntry]:
        """Get the 0-3 ranked entries of a summoner."""
        pass


class IMatchRepository(ABC):
    """Interface for match data."""

    @abstractmethod
    async def get_match_ids(
        self,
        region: Region,
        puuid: str,
        start: int = 0,
        count: int = 20,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> List[str]:
        """Get the most recent match IDs of a player."""
        pass

    @abstractmethod
    async def get_latest_match_id(self, region: Region, puuid: str) -> Optional[str]:
        """Get the id of the player's most recent match, bypassing any cache."""
        pass

    @abstractmethod
    async def get_match(self, region: Region, match_id: str) -> RiotMatch:
        """Get a single match by ID."""
        pass

    @abstractmethod
    async def get_matches(self, region: Region, match_ids: Sequence[str]) -> List[RiotMatch]:
        """Get several matches; all of them or none."""
        pass
