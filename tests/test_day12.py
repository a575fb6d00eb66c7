import pytest

from aoc import day12

SAMPLE = """
F10
N3
F7
R90
F11
"""


def test_parse_action():
    assert day12.parse_action("N3") == ("translate", 3j)
    assert day12.parse_action("F10") == ("forward", 10 + 0j)
    assert day12.parse_action("R90") == ("rotate", -1j)
    assert day12.parse_action("L270") == ("rotate", -1j)


@pytest.mark.parametrize("line", ["X10", "R45", "Fabc"])
def test_parse_action_invalid(line):
    with pytest.raises(ValueError):
        day12.parse_action(line)


def test_ship_turns_heading():
    ship = day12.Ship()
    ship.apply_action(day12.parse_action("L180"))

    assert ship.heading == day12.WEST


def test_waypoint_rotation():
    ship = day12.WaypointShip()
    ship.apply_action(day12.parse_action("R90"))

    assert ship.waypoint == 1 - 10j


def test_manhattan_distance():
    assert day12.manhattan_distance(17 - 8j) == 25


def test_run_sample(write_input):
    assert day12.run([write_input(SAMPLE)]) == (25, 286)
