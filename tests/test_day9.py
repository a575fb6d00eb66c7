import pytest

from aoc import day9

NUMS = [
    35, 20, 15, 25, 47, 40, 62, 55, 65, 95,
    102, 117, 150, 182, 127, 219, 299, 277, 309, 576,
]


def test_find_invalid():
    assert day9.find_invalid(NUMS, preamble_len=5) == (14, 127)


def test_find_invalid_none():
    assert day9.find_invalid([1, 2, 3, 5, 8], preamble_len=2) is None


def test_two_sum_needs_distinct_numbers():
    from collections import Counter

    assert not day9.has_two_sum(Counter([5, 1, 2]), 10)
    assert day9.has_two_sum(Counter([5, 1, 9]), 10)


def test_find_contiguous_ksum():
    assert day9.find_contiguous_ksum(NUMS[:14], 127) == [15, 25, 47, 40]


def test_find_contiguous_ksum_missing():
    with pytest.raises(ValueError):
        day9.find_contiguous_ksum([1, 2, 3], 100)


def test_run_sample_with_preamble_arg(write_input):
    path = write_input("\n".join(map(str, NUMS)) + "\n")

    assert day9.run([path, "5"]) == (127, 62)
