"""Aggregated statistics over a window of normalized games."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChampStats:
    """Per-game averages for one champion."""

    champion_name: str
    games: int
    wins: int
    kda: float
    gold_min: float
    cs_min: float
    vision_min: float
    kill_participation: float
    damage_dealt: float
    damage_taken: float

    @property
    def winrate(self) -> float:
        return self.wins / self.games if self.games else 0.0

    def to_dict(self) -> dict:
        return {
            'champion_name': self.champion_name,
            'games': self.games,
            'wins': self.wins,
            'winrate': round(self.winrate, 4),
            'kda': round(self.kda, 2),
            'gold_min': round(self.gold_min, 2),
            'cs_min': round(self.cs_min, 2),
            'vision_min': round(self.vision_min, 2),
            'kill_participation': round(self.kill_participation, 4),
            'damage_dealt': round(self.damage_dealt, 1),
            'damage_taken': round(self.damage_taken, 1),
        }


@dataclass(frozen=True)
class PositionStats:
    position: str
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'position': self.position, 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class Friend:
    """A teammate who shared at least two games with the player."""

    name: str
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'name': self.name, 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class PlayerStats:
    games_used: tuple[str, ...] = ()
    friends: tuple[Friend, ...] = field(default_factory=tuple)
    stats_by_champ: tuple[ChampStats, ...] = field(default_factory=tuple)
    stats_by_position: tuple[PositionStats, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'games_used': list(self.games_used),
            'friends': [f.to_dict() for f in self.friends],
            'stats_by_champ': [c.to_dict() for c in self.stats_by_champ],
            'stats_by_position': [p.to_dict() for p in self.stats_by_position],
        }
