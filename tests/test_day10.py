import pytest

from aoc import day10

SMALL = [16, 10, 15, 5, 1, 11, 7, 19, 6, 12, 4]
LARGE = [
    28, 33, 18, 42, 31, 14, 46, 20, 48, 47, 24, 23, 49, 45, 19, 38,
    39, 11, 1, 32, 25, 35, 8, 17, 7, 9, 4, 2, 34, 10, 3,
]


def test_chain_adds_outlet_and_device():
    adapters = day10.chain(SMALL)

    assert adapters[0] == 0
    assert adapters[-1] == 22


def test_diffs_distribution():
    assert day10.diffs_distribution(day10.chain(SMALL)).tolist() == [7, 0, 5]
    assert day10.diffs_distribution(day10.chain(LARGE)).tolist() == [22, 0, 10]


def test_diffs_distribution_gap_too_large():
    with pytest.raises(ValueError):
        day10.diffs_distribution(day10.chain([1, 8]))


def test_count_paths():
    assert day10.count_paths(day10.chain(SMALL)) == 8
    assert day10.count_paths(day10.chain(LARGE)) == 19208


def test_run_sample(write_input):
    assert day10.run([write_input("\n".join(map(str, LARGE)) + "\n")]) == (220, 19208)
