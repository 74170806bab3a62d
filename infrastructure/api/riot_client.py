"""Riot Games API client."""
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from config import settings
from core.logging.logger import get_logger
from domain.enums import MatchTypeFilter, Region
from domain.errors import NotFound, RateLimited, Transient
from .rate_limiter import EndpointRateLimiter, WindowConfig

logger = get_logger(__name__, service="riot-api")


def default_rate_limiter() -> EndpointRateLimiter:
    limiter = EndpointRateLimiter(
        WindowConfig(settings.RATE_LIMIT_PER_1_SEC, settings.RATE_LIMIT_PER_2_MIN)
    )
    limiter.configure("match", settings.MATCH_RATE_LIMIT_PER_1_SEC, settings.MATCH_RATE_LIMIT_PER_2_MIN)
    limiter.configure("summoner", settings.SUMMONER_RATE_LIMIT_PER_1_SEC, settings.SUMMONER_RATE_LIMIT_PER_2_MIN)
    limiter.configure("league", settings.LEAGUE_RATE_LIMIT_PER_1_SEC, settings.LEAGUE_RATE_LIMIT_PER_2_MIN)
    limiter.configure("mastery", settings.MASTERY_RATE_LIMIT_PER_1_SEC, settings.MASTERY_RATE_LIMIT_PER_2_MIN)
    limiter.configure("account", settings.ACCOUNT_RATE_LIMIT_PER_1_SEC, settings.ACCOUNT_RATE_LIMIT_PER_2_MIN)
    return limiter


class RiotAPIClient:
    """Asynchronous Riot API client.

    One method per upstream resource, each returning the decoded JSON body.
    Failures are classified, never retried here:

    - 429            -> RateLimited (with Retry-After when sent)
    - 404            -> NotFound
    - anything else  -> Transient (other statuses, timeouts, network errors)

    Data Dragon and CommunityDragon calls go through the same classification but are sent
    without the API key and are not rate limited.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = settings.REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[EndpointRateLimiter] = None,
        ddragon_url: str = settings.DDRAGON_URL,
        ddragon_lang: str = settings.DDRAGON_LANG,
        community_dragon_url: str = settings.COMMUNITY_DRAGON_URL,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.ddragon_url = ddragon_url.rstrip("/")
        self.ddragon_lang = ddragon_lang
        self.community_dragon_url = community_dragon_url.rstrip("/")
        self.rate_limiter = rate_limiter or default_rate_limiter()
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RiotAPIClient":
        self.open()
        return self

    async def __aexit__(self, *_) -> None:
        await self.close()

    def open(self) -> None:
        if self.session is None:
            self.session = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": settings.USER_AGENT},
                transport=self._transport,
            )

    async def close(self) -> None:
        if self.session is not None:
            await self.session.aclose()
            self.session = None

    @staticmethod
    def _platform_url(region: Region) -> str:
        return f"https://{region.platform_route}.api.riotgames.com"

    @staticmethod
    def _regional_url(region: Region) -> str:
        return f"https://{region.regional_route}.api.riotgames.com"

    async def _make_request(
        self,
        url: str,
        endpoint_type: str,
        host: str,
        params: Optional[Dict[str, Any]] = None,
        *,
        authenticated: bool = True,
    ) -> Any:
        if self.session is None:
            self.open()

        headers = {"X-Riot-Token": self.api_key} if authenticated else None
        if authenticated:
            await self.rate_limiter.acquire(endpoint_type, host)

        logger.debug(lambda: f"GET {url}", extra={"endpoint": endpoint_type, "params": params})
        try:
            response = await self.session.get(url, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning(lambda: f"timeout {url}")
            raise Transient(url, reason="timeout") from exc
        except httpx.HTTPError as exc:
            logger.error(lambda: f"network-error {url}: {exc}")
            raise Transient(url, reason=str(exc)) from exc

        status = response.status_code
        if 200 <= status < 300:
            try:
                return response.json()
            except ValueError as exc:
                logger.error(lambda: f"invalid-json {url}")
                raise Transient(url, status, "invalid JSON body") from exc

        if status == 429:
            retry_after = self._retry_after(response)
            logger.warning(lambda: f"429 rate-limited {url}", extra={"retry_after_s": retry_after})
            raise RateLimited(url, retry_after)

        if status == 404:
            logger.info(lambda: f"404 not-found {url}")
            raise NotFound(url)

        if status in (401, 403):
            logger.error(lambda: f"{status} unauthorized, check RIOT_API_KEY", extra={"url": url})
        else:
            logger.warning(lambda: f"HTTP {status} for {url}")
        raise Transient(url, status)

    @staticmethod
    def _retry_after(response: httpx.Response) -> Optional[float]:
        value = response.headers.get("Retry-After")
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            return None

    # ── Account API (regional) ─────────────────────────────────────────

    async def get_account_by_riot_id(self, region: Region, game_name: str, tag_line: str) -> Dict:
        base = self._regional_url(region)
        path = f"/riot/account/v1/accounts/by-riot-id/{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        return await self._make_request(f"{base}{path}", "account", region.regional_route)

    # ── Summoner / Mastery / League API (platform) ─────────────────────

    async def get_summoner_by_puuid(self, region: Region, puuid: str) -> Dict:
        url = f"{self._platform_url(region)}/lol/summoner/v4/summoners/by-puuid/{puuid}"
        return await self._make_request(url, "summoner", region.platform_route)

    async def get_masteries_by_puuid(self, region: Region, puuid: str) -> List[Dict]:
        url = f"{self._platform_url(region)}/lol/champion-mastery/v4/champion-masteries/by-puuid/{puuid}"
        return await self._make_request(url, "mastery", region.platform_route)

    async def get_league_entries_by_summoner(self, region: Region, summoner_id: str) -> List[Dict]:
        url = f"{self._platform_url(region)}/lol/league/v4/entries/by-summoner/{summoner_id}"
        return await self._make_request(url, "league", region.platform_route)

    # ── Match API (regional) ───────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        region: Region,
        puuid: str,
        start: int = 0,
        count: int = 20,
        match_type: MatchTypeFilter = MatchTypeFilter.ALL,
    ) -> List[str]:
        if count <= 0:
            return []
        url = f"{self._regional_url(region)}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        params: Dict[str, Any] = {"start": max(start, 0), "count": min(count, 100)}
        if match_type.query_value:
            params["type"] = match_type.query_value
        return await self._make_request(url, "match", region.regional_route, params=params)

    async def get_match_by_id(self, region: Region, match_id: str) -> Dict:
        url = f"{self._regional_url(region)}/lol/match/v5/matches/{match_id}"
        return await self._make_request(url, "match", region.regional_route)

    # ── Data Dragon ────────────────────────────────────────────────────

    async def get_versions(self) -> List[str]:
        return await self._make_request(
            f"{self.ddragon_url}/api/versions.json", "ddragon", "ddragon", authenticated=False
        )

    async def get_champion_catalog(self, version: str) -> Dict:
        url = f"{self.ddragon_url}/cdn/{version}/data/{self.ddragon_lang}/champion.json"
        return await self._make_request(url, "ddragon", "ddragon", authenticated=False)

    # ── CommunityDragon ────────────────────────────────────────────────

    async def get_cherry_augments(self) -> List[Dict]:
        url = f"{self.community_dragon_url}/plugins/rcp-be-lol-game-data/global/default/v1/cherry-augments.json"
        return await self._make_request(url, "cdragon", "cdragon", authenticated=False)
