"""Tests for champion, position and friends statistics."""

from __future__ import annotations

import pytest

from application.services import StatsAggregator
from domain.schemas import RiotMatch

from conftest import make_match, make_participant


def _game(normalizer, match_id, champion, win=True, position="TOP", teammate_names=None, duration=1800):
    participants = [make_participant(i) for i in range(10)]
    participants[0].update(championName=champion, win=win, teamPosition=position)
    for i, name in enumerate(teammate_names or [], start=1):
        participants[i]["riotIdGameName"] = name
    match = RiotMatch.model_validate(make_match(match_id, participants=participants, game_duration=duration))
    return normalizer.format_game(match, "puuid-0")


def test_per_champion_averages(normalizer):
    games = [
        _game(normalizer, "EUW1_1", "Aatrox", win=True),
        _game(normalizer, "EUW1_2", "Aatrox", win=False),
        _game(normalizer, "EUW1_3", "Ahri", win=True),
    ]

    stats = StatsAggregator().aggregate(games, champs_limit=7)

    aatrox = stats.stats_by_champ[0]
    assert aatrox.champion_name == "Aatrox"
    assert (aatrox.games, aatrox.wins) == (2, 1)
    assert aatrox.winrate == 0.5
    # 2 kills + 4 assists over 3 deaths
    assert aatrox.kda == pytest.approx(2.0)
    assert aatrox.gold_min == pytest.approx(11000 / 30)
    assert aatrox.cs_min == pytest.approx(160 / 30)
    assert aatrox.vision_min == pytest.approx(20 / 30)
    assert aatrox.kill_participation == pytest.approx(0.6)
    assert aatrox.damage_dealt == 18000
    assert stats.games_used == ("EUW1_1", "EUW1_2", "EUW1_3")


def test_champs_limit_keeps_most_played(normalizer):
    games = [
        _game(normalizer, "EUW1_1", "Ahri"),
        _game(normalizer, "EUW1_2", "Jinx"),
        _game(normalizer, "EUW1_3", "Jinx"),
        _game(normalizer, "EUW1_4", "Thresh"),
    ]
    stats = StatsAggregator().aggregate(games, champs_limit=2)
    assert [c.champion_name for c in stats.stats_by_champ] == ["Jinx", "Ahri"]


def test_positions_in_lane_order(normalizer):
    games = [
        _game(normalizer, "EUW1_1", "Ahri", position="MIDDLE", win=False),
        _game(normalizer, "EUW1_2", "Aatrox", position="TOP"),
        _game(normalizer, "EUW1_3", "Ahri", position="MIDDLE"),
        _game(normalizer, "EUW1_4", "Ahri", position=""),
    ]
    stats = StatsAggregator().aggregate(games, champs_limit=7)
    assert [p.to_dict() for p in stats.stats_by_position] == [
        {"position": "TOP", "games": 1, "wins": 1},
        {"position": "MIDDLE", "games": 2, "wins": 1},
    ]


def test_friends_need_two_games_together(normalizer):
    games = [
        _game(normalizer, "EUW1_1", "Ahri", win=True, teammate_names=["Duo"]),
        _game(normalizer, "EUW1_2", "Ahri", win=False, teammate_names=["Duo"]),
        _game(normalizer, "EUW1_3", "Ahri", win=True, teammate_names=["Duo", "Once"]),
    ]
    friends = StatsAggregator().aggregate(games, champs_limit=7).friends

    names = {f.name: (f.games, f.wins) for f in friends}
    assert names["Duo#EUW"] == (3, 2)
    assert "Once#EUW" not in names
    # the default teammates (Player2..Player4) appear in every game too
    assert names["Player3#EUW"] == (3, 2)
    assert friends[0].games == 3


def test_empty_window():
    stats = StatsAggregator().aggregate([], champs_limit=7)
    assert stats.to_dict() == {
        "games_used": [],
        "friends": [],
        "stats_by_champ": [],
        "stats_by_position": [],
    }
