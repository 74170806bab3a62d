from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional, TextIO, Tuple

import httpx

from config import settings
from core.logging.logger import get_logger
from domain.enums import MatchTypeFilter, ResourceKind
from domain.errors import (
    ConfigurationGap,
    MalformedMatch,
    NotFound,
    RateLimited,
    RegistryInitError,
    StatsError,
    Transient,
    UnknownServer,
    ValidationFailure,
)
from domain.interfaces import ICacheStore
from infrastructure import (
    MatchRepository,
    MemoryCacheStore,
    RiotAPIClient,
    SQLiteCacheStore,
    SummonerRepository,
    load_augment_catalog,
    write_augment_snapshot,
)
from application.services import CacheFrontDoor, GameNormalizer, SchemaValidator, VersionRegistry
from application.use_cases import SummonerLookupUseCase

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_RATE_LIMITED = 4
EXIT_UPSTREAM = 5
EXIT_INVALID_PAYLOAD = 6
EXIT_MALFORMED_MATCH = 7
EXIT_CATALOG_GAP = 8
EXIT_STARTUP = 9

# Most specific first.
_EXIT_CODES: Tuple[Tuple[type, int, str], ...] = (
    (UnknownServer, EXIT_USAGE, "unknown server"),
    (NotFound, EXIT_NOT_FOUND, "not found"),
    (RateLimited, EXIT_RATE_LIMITED, "retry later"),
    (Transient, EXIT_UPSTREAM, "upstream error"),
    (ValidationFailure, EXIT_INVALID_PAYLOAD, "unexpected upstream payload"),
    (MalformedMatch, EXIT_MALFORMED_MATCH, "malformed match"),
    (ConfigurationGap, EXIT_CATALOG_GAP, "static catalog is out of date"),
    (RegistryInitError, EXIT_STARTUP, "startup failed"),
)


def split_riot_id(value: str) -> Tuple[str, str]:
    """``"Name#TAG"`` -> ``("Name", "TAG")``."""
    name, sep, tag = value.rpartition("#")
    if not sep or not name or not tag:
        raise argparse.ArgumentTypeError(f"expected a Riot ID like Name#TAG, got {value!r}")
    return name, tag


def longest_ttl_s() -> int:
    return max(
        settings.ACCOUNT_TTL_S,
        settings.SUMMONER_TTL_S,
        settings.MASTERY_TTL_S,
        settings.RANK_TTL_S,
        settings.MATCH_IDS_TTL_S,
        settings.MATCH_TTL_S,
    )


def build_cache_store(backend: str = settings.CACHE_BACKEND, db_path: Optional[Path] = None) -> ICacheStore:
    if backend == "sqlite":
        store = SQLiteCacheStore(db_path or settings.CACHE_DB_PATH)
        # Rows past the longest TTL can never be served again.
        store.purge_older_than(longest_ttl_s())
        return store
    return MemoryCacheStore()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lol-stats", description="League of Legends player statistics")
    sub = parser.add_subparsers(dest="command", required=True)

    def with_player(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
        p.add_argument("server", help="platform server code, e.g. euw1")
        p.add_argument("riot_id", type=split_riot_id, help="Riot ID, e.g. Name#TAG")
        return p

    def with_window(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
        p.add_argument("--games-limit", type=int, default=settings.GAMES_LIMIT)
        p.add_argument("--offset", type=int, default=0)
        p.add_argument(
            "--queue-type",
            type=MatchTypeFilter.from_string,
            default=MatchTypeFilter.ALL,
            help="ranked | normal | all",
        )
        return p

    with_player(sub.add_parser("profile", help="profile header with ranks"))
    with_player(sub.add_parser("rank", help="solo, flex and arena standings"))
    with_player(sub.add_parser("masteries", help="top champion masteries")).add_argument(
        "--limit", type=int, default=settings.MASTERIES_LIMIT
    )
    with_window(with_player(sub.add_parser("games", help="recent normalized games")))
    champs = with_window(with_player(sub.add_parser("champs", help="champion, position and friends stats")))
    champs.add_argument("--champs-limit", type=int, default=settings.CHAMPS_LIMIT)

    game = sub.add_parser("game", help="all-participants view of one match")
    game.add_argument("server")
    game.add_argument("match_id")
    game.add_argument("--puuid", default=None, help="highlight this player")

    last = sub.add_parser("last-game", help="is this match the player's most recent one")
    last.add_argument("server")
    last.add_argument("puuid")
    last.add_argument("match_id")

    refresh = sub.add_parser("refresh-augments", help="rewrite the arena augment table from CommunityDragon")
    refresh.add_argument("--output", type=Path, default=settings.AUGMENTS_PATH)
    return parser


class StatsCommand:
    """Runs one lookup and prints the normalized record as JSON."""

    def __init__(
        self,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cache_store: Optional[ICacheStore] = None,
        out: TextIO = sys.stdout,
    ) -> None:
        self._log = get_logger(__name__, service="stats-cli")
        self._transport = transport
        self._cache_store = cache_store
        self._out = out

    async def _dispatch(self, use_case: SummonerLookupUseCase, args: argparse.Namespace) -> Any:
        cmd = args.command
        if cmd == "profile":
            return (await use_case.get_profile(args.server, *args.riot_id)).to_dict()
        if cmd == "rank":
            return (await use_case.get_rank(args.server, *args.riot_id)).to_dict()
        if cmd == "masteries":
            masteries = await use_case.get_masteries(args.server, *args.riot_id, limit=args.limit)
            return [m.to_dict() for m in masteries]
        if cmd == "games":
            batch = await use_case.get_games(
                args.server, *args.riot_id, args.games_limit, args.offset, args.queue_type
            )
            return batch.to_dict()
        if cmd == "champs":
            stats = await use_case.get_champ_stats(
                args.server, *args.riot_id, args.champs_limit, args.games_limit, args.offset, args.queue_type
            )
            return stats.to_dict()
        if cmd == "game":
            return (await use_case.get_game_detail(args.server, args.match_id, args.puuid)).to_dict()
        if cmd == "last-game":
            is_last, last_game_id = await use_case.is_last_game(args.server, args.puuid, args.match_id)
            return {"is_last": is_last, "last_game_id": last_game_id}
        raise ValueError(f"Unknown command {cmd!r}")

    async def _refresh_augments(self, output: Path) -> int:
        async with RiotAPIClient(settings.RIOT_API_KEY, transport=self._transport) as api:
            try:
                payload = await api.get_cherry_augments()
                augments = SchemaValidator().require(ResourceKind.AUGMENT_LIST, payload, subject="cherry-augments")
            except StatsError as exc:
                return self._report(exc)
        written = write_augment_snapshot(augments, output)
        print(json.dumps({"written": written, "path": str(output)}, indent=2), file=self._out)
        return EXIT_OK

    async def _execute(self, args: argparse.Namespace) -> int:
        if args.command == "refresh-augments":
            return await self._refresh_augments(args.output)

        try:
            settings.validate()
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_CONFIG
        settings.create_directories()

        cache = CacheFrontDoor(self._cache_store or build_cache_store())
        validator = SchemaValidator()

        async with RiotAPIClient(settings.RIOT_API_KEY, transport=self._transport) as api:
            try:
                versions = await VersionRegistry(api, validator).initialize()
                augments = load_augment_catalog()
            except RegistryInitError as exc:
                self._log.critical(lambda: f"startup-aborted {exc}")
                print(f"error: startup failed: {exc}", file=sys.stderr)
                return EXIT_STARTUP

            use_case = SummonerLookupUseCase(
                SummonerRepository(api, cache, validator),
                MatchRepository(api, cache, validator),
                versions,
                GameNormalizer(versions, augments),
            )
            try:
                result = await self._dispatch(use_case, args)
            except StatsError as exc:
                return self._report(exc)

        print(json.dumps(result, ensure_ascii=False, indent=2), file=self._out)
        return EXIT_OK

    def _report(self, exc: StatsError) -> int:
        for cls, code, label in _EXIT_CODES:
            if isinstance(exc, cls):
                self._log.warning(lambda: f"command-failed {type(exc).__name__}: {exc}")
                print(f"error: {label}: {exc}", file=sys.stderr)
                return code
        raise exc


async def run(argv: Optional[Iterable[str]] = None, **kwargs: Any) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv or []))
    return await StatsCommand(**kwargs)._execute(args)
