"""Reconciled ranked standings."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RankSlot:
    """Standing in one ranked queue."""

    rank: str = "Unranked"        # "GOLD II" or "Unranked"
    image: str = "unranked.png"   # tier emblem file name
    lp: int = 0
    wins: int = 0
    losses: int = 0
    winrate: float = 0.0          # 0..1

    def to_dict(self) -> dict:
        return {
            'rank': self.rank,
            'image': self.image,
            'lp': self.lp,
            'wins': self.wins,
            'losses': self.losses,
            'winrate': self.winrate,
        }


UNRANKED = RankSlot()


@dataclass(frozen=True)
class ReconciledRank:
    """The three fixed queue slots; absent queues hold the unranked default."""

    solo: RankSlot = field(default=UNRANKED)
    flex: RankSlot = field(default=UNRANKED)
    arena: RankSlot = field(default=UNRANKED)

    def to_dict(self) -> dict:
        return {
            'solo': self.solo.to_dict(),
            'flex': self.flex.to_dict(),
            'arena': self.arena.to_dict(),
        }
