import pytest

from aoc import day3

SAMPLE = """
..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""


@pytest.fixture
def trees():
    return day3.parse_geology(SAMPLE.lstrip("\n").encode())


def test_parse_geology_shape(trees):
    assert trees.shape == (11, 11)
    assert trees[0].tolist()[:4] == [False, False, True, True]


@pytest.mark.parametrize("dx, dy, expected", [
    (1, 1, 2),
    (3, 1, 7),
    (5, 1, 3),
    (7, 1, 4),
    (1, 2, 2),
])
def test_count_trees(trees, dx, dy, expected):
    assert day3.count_trees(trees, dx, dy) == expected


def test_parse_geology_rejects_unknown_char():
    with pytest.raises(ValueError):
        day3.parse_geology(b"..#\n.x.\n")


def test_run_sample(write_input):
    assert day3.run([write_input(SAMPLE)]) == (7, 336)
