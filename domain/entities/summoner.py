"""Player-facing records: profile and champion masteries."""
from dataclasses import dataclass

from .rank import ReconciledRank


@dataclass(frozen=True)
class PlayerProfile:
    """Represents a League of Legends player as shown on the profile header."""

    # Identity
    puuid: str
    summoner_id: str
    alias: str      # Riot ID game name
    tag: str        # Riot ID tag line
    server: str

    # Summoner
    image: str      # profile icon URL
    level: int

    rank: ReconciledRank

    @property
    def riot_id(self) -> str:
        return f"{self.alias}#{self.tag}"

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'summoner_id': self.summoner_id,
            'alias': self.alias,
            'tag': self.tag,
            'server': self.server,
            'image': self.image,
            'level': self.level,
            'rank': self.rank.to_dict(),
        }


@dataclass(frozen=True)
class Mastery:
    """One champion mastery line."""

    name: str
    image: str
    level: int
    points: int

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'image': self.image,
            'level': self.level,
            'points': self.points,
        }
