"""Player lookups: profile, masteries, ranks, games and champion stats."""
from __future__ import annotations

from typing import List, Optional, Tuple

from config import settings
from core.logging import context
from core.logging.logger import get_logger
from domain.entities import (
    GameDetail,
    Mastery,
    NormalizedBatch,
    PlayerProfile,
    PlayerStats,
    ReconciledRank,
    VersionTable,
)
from domain.enums import MatchTypeFilter, Region
from domain.errors import ConfigurationGap
from domain.interfaces import IMatchRepository, ISummonerRepository
from domain.schemas import RiotAccount
from application.services import GameNormalizer, RankReconciler, StatsAggregator

logger = get_logger(__name__, service="lookup")


class SummonerLookupUseCase:
    """
    Entry point for every read the presentation layer makes.

    Players are addressed by server code plus Riot ID. Everything that names
    champions needs the ``VersionTable``, so this use case is only built once
    the version registry has been initialized.
    """

    def __init__(
        self,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
        versions: VersionTable,
        normalizer: GameNormalizer,
        reconciler: Optional[RankReconciler] = None,
        aggregator: Optional[StatsAggregator] = None,
    ):
        self.summoner_repo = summoner_repo
        self.match_repo = match_repo
        self.versions = versions
        self.normalizer = normalizer
        self.reconciler = reconciler or RankReconciler()
        self.aggregator = aggregator or StatsAggregator()

    async def resolve(self, server: str, game_name: str, tag_line: str) -> Tuple[Region, RiotAccount]:
        region = Region.from_server(server)
        account = await self.summoner_repo.get_account(region, game_name, tag_line)
        return region, account

    # ── Profile / ranks / masteries ────────────────────────────────────

    async def get_profile(self, server: str, game_name: str, tag_line: str) -> PlayerProfile:
        region, account = await self.resolve(server, game_name, tag_line)
        with context(server=region.value, puuid=account.puuid):
            summoner = await self.summoner_repo.get_summoner(region, account.puuid)
            entries = await self.summoner_repo.get_rank_entries(region, summoner.id)
            logger.info(lambda: f"profile {account.gameName}#{account.tagLine} ranked-entries={len(entries)}")

            return PlayerProfile(
                puuid=account.puuid,
                summoner_id=summoner.id,
                alias=account.gameName,
                tag=account.tagLine,
                server=region.value,
                image=self.versions.profile_icon_url(summoner.profileIconId),
                level=summoner.summonerLevel,
                rank=self.reconciler.reconcile(entries),
            )

    async def get_rank(self, server: str, game_name: str, tag_line: str) -> ReconciledRank:
        region, account = await self.resolve(server, game_name, tag_line)
        summoner = await self.summoner_repo.get_summoner(region, account.puuid)
        return self.reconciler.reconcile(await self.summoner_repo.get_rank_entries(region, summoner.id))

    async def get_masteries(
        self,
        server: str,
        game_name: str,
        tag_line: str,
        limit: int = settings.MASTERIES_LIMIT,
    ) -> List[Mastery]:
        """Top ``limit`` champions by mastery points, highest first."""
        region, account = await self.resolve(server, game_name, tag_line)
        masteries = await self.summoner_repo.get_masteries(region, account.puuid)
        ranked = sorted(masteries, key=lambda m: m.championPoints, reverse=True)
        limit = min(max(limit, 0), len(ranked))
        logger.debug(lambda: f"masteries found={len(ranked)} returning={limit}")

        result: List[Mastery] = []
        for mastery in ranked[:limit]:
            try:
                name = self.versions.require_champion(mastery.championId)
            except ConfigurationGap as exc:
                logger.error(lambda: f"catalog-defect {exc}", extra={"catalog": exc.catalog, "key": exc.key})
                raise
            result.append(Mastery(
                name=name,
                image=self.versions.champion_image_url(name),
                level=mastery.championLevel,
                points=mastery.championPoints,
            ))
        return result

    # ── Matches ────────────────────────────────────────────────────────

    async def get_match_ids(
        self,
        server: str,
        puuid: str,
        limit: int = settings.GAMES_LIMIT,
        offset: int = 0,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> List[str]:
        region = Region.from_server(server)
        return await self.match_repo.get_match_ids(region, puuid, offset, limit, match_type)

    async def get_games(
        self,
        server: str,
        game_name: str,
        tag_line: str,
        limit: int = settings.GAMES_LIMIT,
        offset: int = 0,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> NormalizedBatch:
        """
        Normalized recent games of a player.

        Fetching and validation are all-or-nothing for the batch; a match that
        then fails to normalize is listed under ``skipped``.
        """
        region, account = await self.resolve(server, game_name, tag_line)
        with context(server=region.value, puuid=account.puuid):
            match_ids = await self.match_repo.get_match_ids(region, account.puuid, offset, limit, match_type)
            matches = await self.match_repo.get_matches(region, match_ids)
            batch = self.normalizer.normalize_batch(matches, account.puuid)
            logger.info(lambda: f"games normalized={len(batch.games)} skipped={len(batch.skipped)}")
            return batch

    async def get_game_detail(self, server: str, match_id: str, puuid: Optional[str] = None) -> GameDetail:
        region = Region.from_server(server)
        with context(server=region.value, match_id=match_id):
            match = await self.match_repo.get_match(region, match_id)
            try:
                return self.normalizer.format_game_detail(match, puuid)
            except ConfigurationGap as exc:
                logger.error(lambda: f"catalog-defect {exc}", extra={"catalog": exc.catalog, "key": exc.key})
                raise

    async def get_champ_stats(
        self,
        server: str,
        game_name: str,
        tag_line: str,
        champs_limit: int = settings.CHAMPS_LIMIT,
        games_limit: int = settings.GAMES_LIMIT,
        offset: int = 0,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> PlayerStats:
        batch = await self.get_games(server, game_name, tag_line, games_limit, offset, match_type)
        return self.aggregator.aggregate(batch.games, champs_limit)

    async def is_last_game(self, server: str, puuid: str, match_id: str) -> Tuple[bool, Optional[str]]:
        """Whether ``match_id`` is the most recent game of ``puuid``; also returns that game's id."""
        region = Region.from_server(server)
        last_game_id = await self.match_repo.get_latest_match_id(region, puuid)
        return last_game_id == match_id, last_game_id
