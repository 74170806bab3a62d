"""All-participants view of one match."""
from dataclasses import dataclass
from typing import Optional

from .catalog import Augment
from .game import RunePerks


@dataclass(frozen=True)
class Ban:
    pick_turn: int
    champion_image: Optional[str]  # None for an unused ban slot

    def to_dict(self) -> dict:
        return {'pick_turn': self.pick_turn, 'champion_image': self.champion_image}


@dataclass(frozen=True)
class ObjectiveOutcome:
    type: str
    first: bool
    kills: int

    def to_dict(self) -> dict:
        return {'type': self.type, 'first': self.first, 'kills': self.kills}


@dataclass(frozen=True)
class TeamDetail:
    team_id: int
    win: bool
    bans: tuple[Ban, ...]
    objectives: tuple[ObjectiveOutcome, ...]

    def to_dict(self) -> dict:
        return {
            'team_id': self.team_id,
            'win': self.win,
            'bans': [b.to_dict() for b in self.bans],
            'objectives': [o.to_dict() for o in self.objectives],
        }


@dataclass(frozen=True)
class MultiKill:
    doubles: int
    triples: int
    quadras: int
    pentas: int

    def to_dict(self) -> dict:
        return {
            'doubles': self.doubles,
            'triples': self.triples,
            'quadras': self.quadras,
            'pentas': self.pentas,
        }


@dataclass(frozen=True)
class DetailParticipant:
    # Identity
    summoner_name: str
    riot_id_game_name: str
    riot_id_tag_line: str
    team_id: int
    team_position: str
    placement: int  # 0 outside arena

    # Outcome
    win: bool
    is_early_surrender: bool

    # Champion
    champion_name: str
    champ_level: int
    largest_multi_kill: int
    damage_dealt: int
    damage_taken: int

    # Stats
    kills: int
    deaths: int
    assists: int
    multi_kill: MultiKill
    vision_score: int
    gold: int
    cs: int
    ward: int
    items: tuple[int, ...]

    # Loadout
    spells: tuple[int, int]
    perks: Optional[RunePerks]  # None in arena, which has no rune pages
    augments: tuple[Augment, ...]

    def to_dict(self) -> dict:
        return {
            'summoner_name': self.summoner_name,
            'riot_id_game_name': self.riot_id_game_name,
            'riot_id_tag_line': self.riot_id_tag_line,
            'team_id': self.team_id,
            'team_position': self.team_position,
            'placement': self.placement,
            'win': self.win,
            'is_early_surrender': self.is_early_surrender,
            'champ': {
                'champion_name': self.champion_name,
                'champ_level': self.champ_level,
                'largest_multi_kill': self.largest_multi_kill,
                'damage_dealt': self.damage_dealt,
                'damage_taken': self.damage_taken,
            },
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'multi_kill': self.multi_kill.to_dict(),
            'vision_score': self.vision_score,
            'gold': self.gold,
            'cs': self.cs,
            'ward': self.ward,
            'items': list(self.items),
            'spells': list(self.spells),
            'perks': self.perks.to_dict() if self.perks else None,
            'augments': [a.to_dict() for a in self.augments],
        }


@dataclass(frozen=True)
class GameDetail:
    match_id: str
    queue_id: int
    game_mode: str
    game_creation: int
    game_duration: int
    participant_number: Optional[int]  # requester's upstream index, when one was given
    teams: tuple[TeamDetail, ...]
    participants: tuple[DetailParticipant, ...]

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'queue_id': self.queue_id,
            'game_mode': self.game_mode,
            'game_creation': self.game_creation,
            'game_duration': self.game_duration,
            'participant_number': self.participant_number,
            'teams': [t.to_dict() for t in self.teams],
            'participants': [p.to_dict() for p in self.participants],
        }
