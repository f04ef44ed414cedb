"""Lessons on dictionaries: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass


def fruit_basket() -> dict[str, int]:
    """Return a basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 1, "mango": 6}


class Fruit(enum.Enum):
    """Kinds of fruit for the cake."""

    APPLE = enum.auto()
    BANANA = enum.auto()
    MANGO = enum.auto()
    LYCHEE = enum.auto()
    PINEAPPLE = enum.auto()


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add seven of every fruit kind not yet in the basket, leaving others alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 7)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = int(fields[2]), int(fields[3])
        for name, scored, conceded in (
            (team_1, goals_1, goals_2),
            (team_2, goals_2, goals_1),
        ):
            team = scores.setdefault(name, Team())
            team.goals_scored += scored
            team.goals_conceded += conceded
    return scores