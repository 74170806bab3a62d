"""Champion, position and premade statistics over a window of games."""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List

from domain.entities import ChampStats, Friend, Game, PlayerStats, PositionStats, RosterEntry
from domain.enums import Role

MIN_GAMES_TOGETHER = 2


@dataclass
class _ChampTotals:
    games: int = 0
    wins: int = 0
    kda: float = 0.0
    gold_min: float = 0.0
    cs_min: float = 0.0
    vision_min: float = 0.0
    kill_participation: float = 0.0
    damage_dealt: int = 0
    damage_taken: int = 0

    def add(self, game: Game) -> None:
        minutes = game.game_duration / 60
        self.games += 1
        self.wins += int(game.win)
        self.kda += game.kda
        if minutes:
            self.gold_min += game.gold / minutes
            self.cs_min += game.cs / minutes
            self.vision_min += game.vision_score / minutes
        self.kill_participation += game.kill_participation
        self.damage_dealt += game.damage_dealt
        self.damage_taken += game.damage_taken

    def averages(self, champion_name: str) -> ChampStats:
        n = self.games
        return ChampStats(
            champion_name=champion_name,
            games=n,
            wins=self.wins,
            kda=self.kda / n,
            gold_min=self.gold_min / n,
            cs_min=self.cs_min / n,
            vision_min=self.vision_min / n,
            kill_participation=self.kill_participation / n,
            damage_dealt=self.damage_dealt / n,
            damage_taken=self.damage_taken / n,
        )


def _friend_key(entry: RosterEntry) -> str:
    if entry.riot_id_game_name:
        return f"{entry.riot_id_game_name}#{entry.riot_id_tag_line}"
    return entry.summoner_name


class StatsAggregator:
    """Aggregates normalized games of one player.

    Champions are ordered by games played (ties keep first-seen order) and cut
    to ``champs_limit``. Positions follow the in-game lane order and only list
    lanes that were actually played. Friends are teammates met in at least
    two of the games.
    """

    def aggregate(self, games: Iterable[Game], champs_limit: int) -> PlayerStats:
        games = list(games)

        champs: Dict[str, _ChampTotals] = {}
        positions: Dict[Role, List[int]] = defaultdict(lambda: [0, 0])
        together: Dict[str, List[int]] = defaultdict(lambda: [0, 0])

        for game in games:
            champs.setdefault(game.champion_name, _ChampTotals()).add(game)

            role = Role.from_team_position(game.team_position)
            if role is not Role.UNSELECTED:
                positions[role][0] += 1
                positions[role][1] += int(game.win)

            for mate in game.teammates:
                counts = together[_friend_key(mate)]
                counts[0] += 1
                counts[1] += int(game.win)

        by_champ = sorted(champs.items(), key=lambda kv: kv[1].games, reverse=True)
        limit = max(champs_limit, 0)

        return PlayerStats(
            games_used=tuple(g.match_id for g in games),
            friends=tuple(
                Friend(name=name, games=n, wins=w)
                for name, (n, w) in sorted(together.items(), key=lambda kv: kv[1][0], reverse=True)
                if n >= MIN_GAMES_TOGETHER
            ),
            stats_by_champ=tuple(totals.averages(name) for name, totals in by_champ[:limit]),
            stats_by_position=tuple(
                PositionStats(position=role.value, games=positions[role][0], wins=positions[role][1])
                for role in Role
                if role in positions
            ),
        )
