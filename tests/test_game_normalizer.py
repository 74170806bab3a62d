"""Tests for normalizing raw matches into game records."""

from __future__ import annotations

import pytest

from domain.entities import ArenaExtension, StandardExtension
from domain.errors import ConfigurationGap, MalformedMatch
from domain.schemas import RiotMatch

from conftest import CDRAGON, DDRAGON, make_arena_match, make_match, make_participant


def _match(payload) -> RiotMatch:
    return RiotMatch.model_validate(payload)


class TestVariant:
    def test_standard_queue_gets_only_standard_extension(self, normalizer):
        game = normalizer.format_game(_match(make_match()), "puuid-0")

        assert isinstance(game.extension, StandardExtension)
        assert game.variant == "standard"
        assert game.extension.spells == (4, 12)
        assert game.extension.perks.to_dict() == {
            "primary": {"style": 8000, "perk": 8010},
            "secondary": {"style": 8400},
        }
        out = game.to_dict()
        assert "spells" in out and "perks" in out
        assert "augments" not in out and "placement" not in out

    def test_arena_queue_gets_only_arena_extension(self, normalizer):
        game = normalizer.format_game(_match(make_arena_match()), "puuid-1")

        assert isinstance(game.extension, ArenaExtension)
        assert game.variant == "arena"
        assert game.extension.placement == 1
        assert game.extension.subteam_placement == 1
        out = game.to_dict()
        assert "augments" in out and "placement" in out
        assert "spells" not in out and "perks" not in out

    def test_variant_follows_queue_id_only(self, normalizer):
        payload = make_arena_match()
        payload["info"]["queueId"] = 450
        for p in payload["info"]["participants"]:
            p["perks"] = make_participant(0)["perks"]

        game = normalizer.format_game(_match(payload), "puuid-0")

        assert game.variant == "standard"
        assert game.game_mode == "ARAM"


class TestAugments:
    def test_zero_ids_are_filtered_before_resolution(self, normalizer):
        game = normalizer.format_game(_match(make_arena_match(augments=(0, 7, 0, 1))), "puuid-0")
        assert [a.augment_id for a in game.extension.augments] == [7, 1]
        assert game.to_dict()["augments"][0] == {
            "id": 7,
            "name": "Deft",
            "rarity": "silver",
            "icon": f"{CDRAGON}/deft_large.png",
        }

    def test_missing_augment_raises_configuration_gap(self, normalizer):
        match = _match(make_arena_match(augments=(1, 999, 0, 0)))
        with pytest.raises(ConfigurationGap) as exc_info:
            normalizer.format_game(match, "puuid-0")
        assert exc_info.value.key == 999
        assert exc_info.value.catalog == "arena augment"

    def test_absent_augment_fields_mean_no_augments(self, normalizer):
        payload = make_arena_match()
        for p in payload["info"]["participants"]:
            for slot in ("playerAugment1", "playerAugment2", "playerAugment3", "playerAugment4"):
                del p[slot]
        game = normalizer.format_game(_match(payload), "puuid-0")
        assert game.extension.augments == ()


class TestDerivedFields:
    def test_ward_defaults_when_trinket_slot_empty(self, normalizer):
        payload = make_match()
        payload["info"]["participants"][0]["item6"] = 0
        payload["info"]["participants"][1]["item6"] = 3364
        match = _match(payload)

        assert normalizer.format_game(match, "puuid-0").ward == 2052
        assert normalizer.format_game(match, "puuid-1").ward == 3364

    def test_creep_score_and_items(self, normalizer):
        game = normalizer.format_game(_match(make_match()), "puuid-0")
        assert game.cs == 160
        assert game.items == (3078, 3047, 6333, 0, 0, 0)

    def test_kill_participation_uses_requester_half(self, normalizer):
        payload = make_match()
        for i, p in enumerate(payload["info"]["participants"]):
            p["kills"] = i
        payload["info"]["participants"][7]["assists"] = 5

        game = normalizer.format_game(_match(payload), "puuid-7")

        # players 5..9 killed 5+6+7+8+9 = 35
        assert game.kill_participation == pytest.approx((7 + 5) / 35)

    def test_kill_participation_first_half(self, normalizer):
        game = normalizer.format_game(_match(make_match()), "puuid-4")
        assert game.kill_participation == pytest.approx(0.6)

    def test_zero_team_kills_gives_zero_participation(self, normalizer):
        payload = make_match()
        for p in payload["info"]["participants"][:5]:
            p["kills"] = 0
        payload["info"]["participants"][2]["assists"] = 3

        game = normalizer.format_game(_match(payload), "puuid-2")

        assert game.kill_participation == 0.0

    def test_envelope_fields(self, normalizer):
        game = normalizer.format_game(_match(make_match()), "puuid-0")
        assert game.match_id == "EUW1_7000000001"
        assert game.participant_number == 0
        assert game.game_mode == "Ranked Solo/Duo"
        assert game.team_position == "TOP"
        assert game.position_icon.startswith(CDRAGON)
        assert game.position_icon.endswith("/icon-position-top.png")
        assert len(game.roster) == 10
        assert game.roster[9].riot_id_game_name == "Player9"
        assert [m.summoner_name for m in game.teammates] == ["Summoner1", "Summoner2", "Summoner3", "Summoner4"]

    def test_unlisted_queue_falls_back_to_game_mode(self, normalizer):
        payload = make_match(queue_id=3100)
        assert normalizer.format_game(_match(payload), "puuid-0").game_mode == "CLASSIC"

    def test_arena_has_no_position_icon(self, normalizer):
        game = normalizer.format_game(_match(make_arena_match()), "puuid-0")
        assert game.team_position == ""
        assert game.position_icon is None


class TestMalformed:
    def test_requester_not_in_match(self, normalizer):
        with pytest.raises(MalformedMatch) as exc_info:
            normalizer.format_game(_match(make_match()), "someone-else")
        assert exc_info.value.match_id == "EUW1_7000000001"

    def test_identity_list_misaligned(self, normalizer):
        payload = make_match()
        payload["metadata"]["participants"].pop()
        with pytest.raises(MalformedMatch):
            normalizer.format_game(_match(payload), "puuid-0")

    def test_missing_rune_tree(self, normalizer):
        payload = make_match()
        payload["info"]["participants"][0]["perks"]["styles"] = payload["info"]["participants"][0]["perks"]["styles"][:1]
        with pytest.raises(MalformedMatch):
            normalizer.format_game(_match(payload), "puuid-0")


class TestBatch:
    def test_order_preserved_and_failures_skipped(self, normalizer):
        good_a = make_match("EUW1_1")
        bad = make_arena_match("EUW1_2", augments=(404, 0, 0, 0))
        good_b = make_match("EUW1_3")
        stranger = make_match("EUW1_4")
        stranger["metadata"]["participants"][0] = "not-me"

        batch = normalizer.normalize_batch([_match(m) for m in (good_a, bad, good_b, stranger)], "puuid-0")

        assert [g.match_id for g in batch.games] == ["EUW1_1", "EUW1_3"]
        assert [(s.match_id, s.error) for s in batch.skipped] == [
            ("EUW1_2", "ConfigurationGap"),
            ("EUW1_4", "MalformedMatch"),
        ]
        assert batch.find("EUW1_3") is batch.games[1]
        assert batch.find("EUW1_2") is None


class TestDetail:
    def test_placement_order_is_stable(self, normalizer):
        detail = normalizer.format_game_detail(_match(make_arena_match()))

        assert [p.placement for p in detail.participants] == [1, 1, 2, 3, 3, 4, 5, 5, 6, 9]
        assert [p.summoner_name for p in detail.participants] == [
            "Summoner1", "Summoner3", "Summoner6", "Summoner0", "Summoner9",
            "Summoner2", "Summoner4", "Summoner8", "Summoner7", "Summoner5",
        ]

    def test_non_arena_keeps_upstream_order(self, normalizer):
        detail = normalizer.format_game_detail(_match(make_match()))
        assert [p.placement for p in detail.participants] == [0] * 10
        assert [p.summoner_name for p in detail.participants] == [f"Summoner{i}" for i in range(10)]

    def test_bans_and_objectives(self, normalizer):
        detail = normalizer.format_game_detail(_match(make_match()))
        blue = detail.teams[0]

        assert blue.team_id == 100 and blue.win
        assert blue.bans[0].champion_image == f"{DDRAGON}/cdn/14.12.1/img/champion/Ahri.png"
        assert blue.bans[1].champion_image is None
        assert [(o.type, o.first, o.kills) for o in blue.objectives] == [
            ("baron", True, 1),
            ("dragon", False, 2),
            ("tower", True, 7),
        ]

    def test_ban_image_uses_cdn_spelling(self, normalizer):
        payload = make_match()
        payload["info"]["teams"][1]["bans"] = [{"championId": 9, "pickTurn": 6}]
        detail = normalizer.format_game_detail(_match(payload))
        assert detail.teams[1].bans[0].champion_image.endswith("/Fiddlesticks.png")

    def test_unknown_banned_champion_is_configuration_gap(self, normalizer):
        payload = make_match()
        payload["info"]["teams"][0]["bans"] = [{"championId": 9999, "pickTurn": 1}]
        with pytest.raises(ConfigurationGap):
            normalizer.format_game_detail(_match(payload))

    def test_participant_fields(self, normalizer):
        payload = make_match()
        payload["info"]["participants"][3]["item6"] = 0
        detail = normalizer.format_game_detail(_match(payload), "puuid-3")
        p = detail.participants[3]

        assert detail.participant_number == 3
        assert p.ward == 2052
        assert p.cs == 160
        assert p.spells == (4, 12)
        assert p.perks.keystone == 8010
        assert p.augments == ()
        assert p.to_dict()["champ"]["champion_name"] == "Alistar"

    def test_arena_detail_resolves_augments(self, normalizer):
        detail = normalizer.format_game_detail(_match(make_arena_match()), "nobody")
        assert detail.participant_number is None
        assert all(p.perks is None for p in detail.participants)
        assert [a.name for a in detail.participants[0].augments] == ["Get Excited!", "Deft"]
