"""Resolves league entries into the three fixed rank slots."""
from typing import Dict, Iterable

from domain.entities import UNRANKED, RankSlot, ReconciledRank
from domain.enums import RankedQueue
from domain.schemas import RiotRankEntry


def winrate(wins: int, losses: int) -> float:
    total = wins + losses
    return wins / total if total else 0.0


class RankReconciler:
    """
    Reconciles an unordered list of 0-3 league entries by ``queueType``.

    Solo/duo lands in ``solo``, the arena tag in ``arena`` and every other
    tag in ``flex``. A later entry for a slot replaces an earlier one.
    """

    def reconcile(self, entries: Iterable[RiotRankEntry]) -> ReconciledRank:
        slots: Dict[str, RankSlot] = {"solo": UNRANKED, "flex": UNRANKED, "arena": UNRANKED}
        for entry in entries:
            slots[RankedQueue.slot_for(entry.queueType)] = self.to_slot(entry)
        return ReconciledRank(**slots)

    @staticmethod
    def to_slot(entry: RiotRankEntry) -> RankSlot:
        tiered = entry.queueType != RankedQueue.CHERRY.value
        if tiered and entry.tier:
            label = f"{entry.tier} {entry.rank}" if entry.rank else entry.tier
            image = f"{entry.tier.lower()}.png"
        else:
            # Arena standings are cosmetic, not a ladder tier.
            label, image = UNRANKED.rank, UNRANKED.image

        return RankSlot(
            rank=label,
            image=image,
            lp=entry.leaguePoints,
            wins=entry.wins,
            losses=entry.losses,
            winrate=winrate(entry.wins, entry.losses),
        )
