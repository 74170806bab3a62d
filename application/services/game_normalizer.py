"""Turns validated match payloads into normalized game records."""
from typing import Iterable, List, Optional, Sequence, Tuple

from config import settings
from core.logging import context
from core.logging.logger import get_logger
from domain.entities import (
    ArenaExtension,
    Augment,
    AugmentCatalog,
    Ban,
    DetailParticipant,
    Game,
    GameDetail,
    MultiKill,
    NormalizedBatch,
    ObjectiveOutcome,
    RosterEntry,
    RunePerks,
    SkippedMatch,
    StandardExtension,
    TeamDetail,
    VersionTable,
)
from domain.enums import GameQueue, Role
from domain.errors import ConfigurationGap, MalformedMatch
from domain.schemas import RiotMatch, RiotParticipant, RiotTeam

logger = get_logger(__name__, service="normalizer")

Seat = Tuple[str, RiotParticipant]

TEAM_SIZE = 5
NO_AUGMENT = 0
EMPTY_BAN = -1


class GameNormalizer:
    """
    Normalizes one match at a time.

    Every entry point starts by pairing ``metadata.participants`` with
    ``info.participants`` so the index alignment is checked exactly once.
    The queue id is inspected once per match to choose the standard or the
    arena extension.

    Args:
        versions: Champion table used to resolve ban images
        augments: Arena augment catalog
    """

    def __init__(
        self,
        versions: VersionTable,
        augments: AugmentCatalog,
        *,
        arena_queue_id: int = settings.ARENA_QUEUE_ID,
        default_ward_id: int = settings.DEFAULT_WARD_ID,
        community_dragon_url: str = settings.COMMUNITY_DRAGON_URL,
    ):
        self.versions = versions
        self.augments = augments
        self.arena_queue_id = arena_queue_id
        self.default_ward_id = default_ward_id
        self.community_dragon_url = community_dragon_url

    # ── Alignment ──────────────────────────────────────────────────────

    @staticmethod
    def align(match: RiotMatch) -> List[Seat]:
        """(puuid, participant) pairs in upstream order."""
        puuids = match.metadata.participants
        participants = match.info.participants
        if len(puuids) != len(participants):
            raise MalformedMatch(
                match.metadata.matchId,
                f"{len(puuids)} identities for {len(participants)} participants",
            )
        return list(zip(puuids, participants))

    @staticmethod
    def locate(match_id: str, seats: Sequence[Seat], puuid: str) -> int:
        for index, (seat_puuid, _) in enumerate(seats):
            if seat_puuid == puuid:
                return index
        raise MalformedMatch(match_id, "requesting player is not a participant")

    # ── Derived fields ─────────────────────────────────────────────────

    @staticmethod
    def team_kills(seats: Sequence[Seat], index: int) -> int:
        start = 0 if index < TEAM_SIZE else TEAM_SIZE
        return sum(p.kills for _, p in seats[start:start + TEAM_SIZE])

    @staticmethod
    def kill_participation(kills: int, assists: int, team_kills: int) -> float:
        # No team kills means nothing to take part in.
        if team_kills == 0:
            return 0.0
        return (kills + assists) / team_kills

    @staticmethod
    def creep_score(participant: RiotParticipant) -> int:
        return participant.neutralMinionsKilled + participant.totalMinionsKilled

    def ward(self, participant: RiotParticipant) -> int:
        return participant.item6 or self.default_ward_id

    @staticmethod
    def items(participant: RiotParticipant) -> Tuple[int, ...]:
        p = participant
        return (p.item0, p.item1, p.item2, p.item3, p.item4, p.item5)

    @staticmethod
    def rune_perks(match_id: str, participant: RiotParticipant) -> RunePerks:
        styles = participant.perks.styles
        if len(styles) < 2 or not styles[0].selections:
            raise MalformedMatch(match_id, f"incomplete rune page for {participant.championName}")
        primary, secondary = styles[0], styles[1]
        return RunePerks(
            primary_style=primary.style,
            keystone=primary.selections[0].perk,
            secondary_style=secondary.style,
        )

    def resolve_augments(self, participant: RiotParticipant) -> Tuple[Augment, ...]:
        p = participant
        slots = (p.playerAugment1, p.playerAugment2, p.playerAugment3, p.playerAugment4)
        return tuple(
            self.augments.resolve(augment_id)
            for augment_id in slots
            if augment_id is not None and augment_id != NO_AUGMENT
        )

    def position_icon(self, team_position: str) -> Optional[str]:
        role = Role.from_team_position(team_position)
        if role is Role.UNSELECTED:
            return None
        return role.icon_url(self.community_dragon_url)

    @staticmethod
    def roster(seats: Sequence[Seat]) -> Tuple[RosterEntry, ...]:
        return tuple(
            RosterEntry(
                summoner_name=p.summonerName or p.riotIdGameName or "",
                champion_name=p.championName,
                riot_id_game_name=p.riotIdGameName or "",
                riot_id_tag_line=p.riotIdTagline or "",
            )
            for _, p in seats
        )

    def is_arena(self, match: RiotMatch) -> bool:
        return match.info.queueId == self.arena_queue_id

    # ── Requester view ─────────────────────────────────────────────────

    def format_game(self, match: RiotMatch, puuid: str) -> Game:
        """One match from the seat of ``puuid``; raises MalformedMatch or ConfigurationGap."""
        match_id = match.metadata.matchId
        info = match.info
        seats = self.align(match)
        index = self.locate(match_id, seats, puuid)
        p = seats[index][1]

        if self.is_arena(match):
            extension = ArenaExtension(
                augments=self.resolve_augments(p),
                placement=p.placement or 0,
                subteam_placement=p.subteamPlacement or 0,
            )
        else:
            extension = StandardExtension(
                spells=(p.summoner1Id, p.summoner2Id),
                perks=self.rune_perks(match_id, p),
            )

        return Game(
            match_id=match_id,
            queue_id=info.queueId,
            game_mode=GameQueue.label_for(info.queueId, info.gameMode),
            game_creation=info.gameCreation,
            game_duration=info.gameDuration,
            participant_number=index,
            win=p.win,
            team_position=p.teamPosition,
            position_icon=self.position_icon(p.teamPosition),
            is_early_surrender=p.gameEndedInEarlySurrender,
            champion_name=p.championName,
            champ_level=p.champLevel,
            vision_score=p.visionScore,
            kills=p.kills,
            deaths=p.deaths,
            assists=p.assists,
            double_kills=p.doubleKills,
            triple_kills=p.tripleKills,
            quadra_kills=p.quadraKills,
            penta_kills=p.pentaKills,
            kill_participation=self.kill_participation(p.kills, p.assists, self.team_kills(seats, index)),
            damage_dealt=p.totalDamageDealtToChampions,
            damage_taken=p.totalDamageTaken,
            gold=p.goldEarned,
            cs=self.creep_score(p),
            ward=self.ward(p),
            items=self.items(p),
            roster=self.roster(seats),
            extension=extension,
        )

    def normalize_batch(self, matches: Iterable[RiotMatch], puuid: str) -> NormalizedBatch:
        """
        Normalize every match in order.

        A match that cannot be normalized is reported in ``skipped`` and does
        not affect its siblings.
        """
        games: List[Game] = []
        skipped: List[SkippedMatch] = []
        for match in matches:
            match_id = match.metadata.matchId
            with context(match_id=match_id):
                try:
                    games.append(self.format_game(match, puuid))
                except MalformedMatch as exc:
                    logger.warning(lambda: f"skip-match {exc}")
                    skipped.append(SkippedMatch(match_id, type(exc).__name__, exc.reason))
                except ConfigurationGap as exc:
                    logger.error(
                        lambda: f"catalog-defect {exc}",
                        extra={"catalog": exc.catalog, "key": exc.key},
                    )
                    skipped.append(SkippedMatch(match_id, type(exc).__name__, str(exc)))
        return NormalizedBatch(games=tuple(games), skipped=tuple(skipped))

    # ── All-participants view ──────────────────────────────────────────

    def format_game_detail(self, match: RiotMatch, puuid: Optional[str] = None) -> GameDetail:
        """
        Every participant of the match, sorted by placement (0 outside arena).

        ``sorted`` is stable, so tied placements and non-arena games keep
        upstream order.
        """
        match_id = match.metadata.matchId
        info = match.info
        seats = self.align(match)
        arena = self.is_arena(match)

        participant_number = None
        if puuid is not None:
            participant_number = next((i for i, (s, _) in enumerate(seats) if s == puuid), None)

        participants = [self._detail_participant(match_id, p, arena) for _, p in seats]
        participants.sort(key=lambda dp: dp.placement)

        return GameDetail(
            match_id=match_id,
            queue_id=info.queueId,
            game_mode=GameQueue.label_for(info.queueId, info.gameMode),
            game_creation=info.gameCreation,
            game_duration=info.gameDuration,
            participant_number=participant_number,
            teams=tuple(self._team_detail(team) for team in info.teams),
            participants=tuple(participants),
        )

    def _detail_participant(self, match_id: str, p: RiotParticipant, arena: bool) -> DetailParticipant:
        return DetailParticipant(
            summoner_name=p.summonerName or p.riotIdGameName or "",
            riot_id_game_name=p.riotIdGameName or "",
            riot_id_tag_line=p.riotIdTagline or "",
            team_id=p.teamId,
            team_position=p.teamPosition,
            placement=p.placement or 0,
            win=p.win,
            is_early_surrender=p.gameEndedInEarlySurrender,
            champion_name=p.championName,
            champ_level=p.champLevel,
            largest_multi_kill=p.largestMultiKill,
            damage_dealt=p.totalDamageDealtToChampions,
            damage_taken=p.totalDamageTaken,
            kills=p.kills,
            deaths=p.deaths,
            assists=p.assists,
            multi_kill=MultiKill(p.doubleKills, p.tripleKills, p.quadraKills, p.pentaKills),
            vision_score=p.visionScore,
            gold=p.goldEarned,
            cs=self.creep_score(p),
            ward=self.ward(p),
            items=self.items(p),
            spells=(p.summoner1Id, p.summoner2Id),
            perks=None if arena else self.rune_perks(match_id, p),
            augments=self.resolve_augments(p) if arena else (),
        )

    def _ban_image(self, champion_id: int) -> Optional[str]:
        if champion_id == EMPTY_BAN:
            return None
        return self.versions.champion_image_url(self.versions.require_champion(champion_id))

    def _team_detail(self, team: RiotTeam) -> TeamDetail:
        bans = tuple(
            Ban(pick_turn=ban.pickTurn, champion_image=self._ban_image(ban.championId))
            for ban in team.bans
        )
        objectives = tuple(
            ObjectiveOutcome(type=name, first=objective.first, kills=objective.kills)
            for name, objective in team.objectives.items()
        )
        return TeamDetail(team_id=team.teamId, win=team.win, bans=bans, objectives=objectives)
