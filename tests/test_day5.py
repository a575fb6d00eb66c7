import numpy as np
import pytest

from aoc import day5


@pytest.mark.parametrize("boarding_pass, row, col, seat_id", [
    ("FBFBBFFRLR", 44, 5, 357),
    ("BFFFBBFRRR", 70, 7, 567),
    ("FFFBBBFRRR", 14, 7, 119),
    ("BBFFBBFRLL", 102, 4, 820),
])
def test_decode(boarding_pass, row, col, seat_id):
    position = day5.parse_position(boarding_pass)

    assert day5.row(position) == row
    assert day5.col(position) == col
    assert day5.seat_id(position) == seat_id


def test_find_my_seat():
    assert day5.find_my_seat(np.array([12, 9, 10, 13, 8])) == 11


def test_find_my_seat_without_gap():
    with pytest.raises(ValueError):
        day5.find_my_seat(np.array([3, 4, 5]))


def test_invalid_pass():
    with pytest.raises(ValueError):
        day5.parse_position("FBFBXFFRLR")


def test_run(write_input):
    passes = ["FBFBBFFRLR", "FBFBBFFRRR", "FBFBBFBLLL", "FBFBBFBLRL"]
    # ids 357, 359, 360, 362 -> highest gap start is 357 -> 358
    assert day5.run([write_input("\n".join(passes) + "\n")]) == (362, 358)
