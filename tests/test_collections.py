import pytest

from rustdrill.lessons.collections import (
    Fruit,
    Team,
    array_and_vec,
    build_scores_table,
    default_fruit_basket,
    fill_fruit_basket,
    vec_loop,
    vec_map,
)


def test_at_least_three_types_of_fruits():
    assert len(default_fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(default_fruit_basket().values()) >= 5


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    assert build_scores_table(RESULTS)["Spain"] == Team(0, 2)


def test_scores_reject_bad_goal_count():
    with pytest.raises(ValueError):
        build_scores_table("England,France,four,2\n")


def test_scores_reject_short_line():
    with pytest.raises(ValueError):
        build_scores_table("England,France,4\n")


def test_array_and_vec_similarity():
    fixed, values = array_and_vec()
    assert list(fixed) == values == [10, 20, 30, 40]


def test_vec_loop():
    values = [2, 4, 6, 8, 10]
    result = vec_loop(values)
    assert result == [4, 8, 12, 16, 20]
    assert result is values


def test_vec_map():
    values = [2, 4, 6, 8, 10]
    assert vec_map(values) == [4, 8, 12, 16, 20]
    assert values == [2, 4, 6, 8, 10]