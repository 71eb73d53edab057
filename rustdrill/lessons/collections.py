"""Solutions to the collection lessons: fruit baskets, score tables and lists."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


def default_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 5, "pear": 10}


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of each missing kind of fruit, leaving present kinds untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError("goal count does not fit in 0..255")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _goals(text: str) -> int:
    if not text.isascii() or not text.removeprefix("+").isdigit():
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from 'team1,team2,goals1,goals2' lines."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = _goals(fields[2]), _goals(fields[3])
        scores.setdefault(team_1_name, Team()).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team()).record(team_2_score, team_1_score)
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element in place and return the same list."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: list[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]