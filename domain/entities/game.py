"""Normalized game: a common envelope plus exactly one queue-specific extension."""
from dataclasses import dataclass, field
from typing import Optional, Union

from .catalog import Augment


@dataclass(frozen=True)
class RosterEntry:
    """Display identity of one of the players in the match."""

    summoner_name: str
    champion_name: str
    riot_id_game_name: str
    riot_id_tag_line: str

    def to_dict(self) -> dict:
        return {
            'summoner_name': self.summoner_name,
            'champion_name': self.champion_name,
            'riot_id_game_name': self.riot_id_game_name,
            'riot_id_tag_line': self.riot_id_tag_line,
        }


@dataclass(frozen=True)
class RunePerks:
    """Primary tree + keystone, secondary tree."""

    primary_style: int
    keystone: int
    secondary_style: int

    def to_dict(self) -> dict:
        return {
            'primary': {'style': self.primary_style, 'perk': self.keystone},
            'secondary': {'style': self.secondary_style},
        }


@dataclass(frozen=True)
class StandardExtension:
    """Summoner's Rift, ARAM and every other non-arena queue."""

    spells: tuple[int, int]
    perks: RunePerks

    variant = "standard"

    def to_dict(self) -> dict:
        return {
            'spells': list(self.spells),
            'perks': self.perks.to_dict(),
        }


@dataclass(frozen=True)
class ArenaExtension:
    """Free-for-all arena queue."""

    augments: tuple[Augment, ...]
    placement: int
    subteam_placement: int

    variant = "arena"

    def to_dict(self) -> dict:
        return {
            'augments': [a.to_dict() for a in self.augments],
            'placement': self.placement,
            'subteam_placement': self.subteam_placement,
        }


GameExtension = Union[StandardExtension, ArenaExtension]


@dataclass(frozen=True)
class Game:
    """One match seen from the requesting player's seat."""

    # Match identity
    match_id: str
    queue_id: int
    game_mode: str
    game_creation: int   # Unix timestamp milliseconds
    game_duration: int   # Seconds

    # Requesting player
    participant_number: int
    win: bool
    team_position: str
    position_icon: Optional[str]  # None when no position was assigned
    is_early_surrender: bool
    champion_name: str
    champ_level: int
    vision_score: int

    # Combat
    kills: int
    deaths: int
    assists: int
    double_kills: int
    triple_kills: int
    quadra_kills: int
    penta_kills: int
    kill_participation: float
    damage_dealt: int
    damage_taken: int

    # Economy
    gold: int
    cs: int
    ward: int
    items: tuple[int, ...]

    roster: tuple[RosterEntry, ...]
    extension: GameExtension

    def __post_init__(self) -> None:
        if not isinstance(self.extension, (StandardExtension, ArenaExtension)):
            raise TypeError(f"Game extension must be standard or arena, got {type(self.extension).__name__}")

    @property
    def variant(self) -> str:
        return self.extension.variant

    @property
    def kda(self) -> float:
        if self.deaths == 0:
            return float(self.kills + self.assists)
        return (self.kills + self.assists) / self.deaths

    @property
    def teammates(self) -> tuple[RosterEntry, ...]:
        """Roster entries sharing the requester's five-player half, requester excluded."""
        start = 0 if self.participant_number <= 4 else 5
        return tuple(
            entry for i, entry in enumerate(self.roster[start:start + 5], start=start)
            if i != self.participant_number
        )

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'variant': self.variant,
            'queue_id': self.queue_id,
            'game_mode': self.game_mode,
            'game_creation': self.game_creation,
            'game_duration': self.game_duration,
            'participant_number': self.participant_number,
            'win': self.win,
            'team_position': self.team_position,
            'position_icon': self.position_icon,
            'is_early_surrender': self.is_early_surrender,
            'champion_name': self.champion_name,
            'champ_level': self.champ_level,
            'vision_score': self.vision_score,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'double_kills': self.double_kills,
            'triple_kills': self.triple_kills,
            'quadra_kills': self.quadra_kills,
            'penta_kills': self.penta_kills,
            'kill_participation': self.kill_participation,
            'damage_dealt': self.damage_dealt,
            'damage_taken': self.damage_taken,
            'gold': self.gold,
            'cs': self.cs,
            'ward': self.ward,
            'items': list(self.items),
            'participants': [r.to_dict() for r in self.roster],
            **self.extension.to_dict(),
        }


@dataclass(frozen=True)
class SkippedMatch:
    """A match left out of a batch because it could not be normalized."""

    match_id: str
    error: str
    reason: str

    def to_dict(self) -> dict:
        return {'match_id': self.match_id, 'error': self.error, 'reason': self.reason}


@dataclass(frozen=True)
class NormalizedBatch:
    """Games in the order their ids were requested, minus the skipped ones."""

    games: tuple[Game, ...] = ()
    skipped: tuple[SkippedMatch, ...] = field(default_factory=tuple)

    def find(self, match_id: str) -> Optional[Game]:
        return next((g for g in self.games if g.match_id == match_id), None)

    def to_dict(self) -> dict:
        return {
            'games': [g.to_dict() for g in self.games],
            'skipped': [s.to_dict() for s in self.skipped],
        }
