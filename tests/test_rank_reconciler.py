"""Tests for reconciling league entries into solo, flex and arena slots."""

from __future__ import annotations

import itertools

import pytest

from application.services import RankReconciler
from application.services.rank_reconciler import winrate
from domain.entities import UNRANKED
from domain.schemas import RiotRankEntry


def _entry(queue_type: str, tier="GOLD", rank="II", lp=40, wins=3, losses=1) -> RiotRankEntry:
    return RiotRankEntry(
        queueType=queue_type, tier=tier, rank=rank, leaguePoints=lp, wins=wins, losses=losses
    )


SOLO = _entry("RANKED_SOLO_5x5", "PLATINUM", "IV", 12, 30, 10)
FLEX = _entry("RANKED_FLEX_SR", "SILVER", "I", 75, 5, 5)
ARENA = _entry("CHERRY", "GOLD", "I", 0, 9, 3)


def test_winrate_values():
    assert winrate(3, 1) == 0.75
    assert winrate(0, 0) == 0
    assert winrate(0, 4) == 0.0


def test_no_entries_is_all_unranked():
    ranks = RankReconciler().reconcile([])
    assert ranks.solo == ranks.flex == ranks.arena == UNRANKED
    assert ranks.solo.winrate == 0


@pytest.mark.parametrize(
    "entries",
    [list(p) for n in range(4) for c in itertools.combinations([SOLO, FLEX, ARENA], n) for p in itertools.permutations(c)],
)
def test_three_slots_always_populated_in_any_order(entries):
    ranks = RankReconciler().reconcile(entries)
    present = {e.queueType for e in entries}

    assert ranks.solo.rank == ("PLATINUM IV" if "RANKED_SOLO_5x5" in present else "Unranked")
    assert ranks.flex.rank == ("SILVER I" if "RANKED_FLEX_SR" in present else "Unranked")
    assert ranks.arena.rank == "Unranked"
    assert ranks.arena.wins == (9 if "CHERRY" in present else 0)
    assert set(ranks.to_dict()) == {"solo", "flex", "arena"}


def test_slot_fields():
    solo = RankReconciler().reconcile([_entry("RANKED_SOLO_5x5", wins=3, losses=1)]).solo
    assert solo.rank == "GOLD II"
    assert solo.image == "gold.png"
    assert solo.lp == 40
    assert solo.winrate == 0.75


def test_arena_is_always_displayed_unranked():
    arena = RankReconciler().reconcile([ARENA]).arena
    assert arena.rank == "Unranked"
    assert arena.image == "unranked.png"
    assert arena.winrate == 0.75


def test_unknown_queue_lands_in_flex():
    ranks = RankReconciler().reconcile([_entry("RANKED_TFT_DOUBLE_UP", "DIAMOND", "III")])
    assert ranks.flex.rank == "DIAMOND III"
    assert ranks.solo == UNRANKED


def test_last_write_wins_per_slot():
    first = _entry("RANKED_SOLO_5x5", "IRON", "IV")
    second = _entry("RANKED_SOLO_5x5", "BRONZE", "I")
    assert RankReconciler().reconcile([first, second]).solo.rank == "BRONZE I"


def test_entry_without_tier_is_unranked_label():
    ranks = RankReconciler().reconcile([_entry("RANKED_FLEX_SR", tier=None, rank=None, wins=0, losses=0)])
    assert ranks.flex.rank == "Unranked"
    assert ranks.flex.winrate == 0
