import pytest

from aoc import day15


def test_first_turns():
    game = day15.Game([0, 3, 6])

    assert [game.step_until_round(round_) for round_ in range(4, 11)] == [0, 3, 3, 1, 0, 4, 0]


@pytest.mark.parametrize("starting, expected", [
    ([0, 3, 6], 436),
    ([1, 3, 2], 1),
    ([2, 1, 3], 10),
    ([1, 2, 3], 27),
    ([2, 3, 1], 78),
    ([3, 2, 1], 438),
    ([3, 1, 2], 1836),
])
def test_round_2020(starting, expected):
    assert day15.Game(starting).step_until_round(day15.PART1_ROUND) == expected


def test_resumes_from_previous_round():
    game = day15.Game([0, 3, 6])
    game.step_until_round(10)

    assert game.step_until_round(2020) == 436


def test_parse_starting_numbers():
    assert day15.parse_starting_numbers("0,3,6\n") == [0, 3, 6]


def test_empty_game():
    with pytest.raises(ValueError):
        day15.Game([])
