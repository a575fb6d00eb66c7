import logging

import pytest

from aoc import day17

SAMPLE = """
.#.
..#
###
"""


@pytest.fixture
def slice0():
    return day17.parse_input(SAMPLE)


def test_parse_input(slice0):
    assert slice0.tolist() == [[0, 1, 0], [0, 0, 1], [1, 1, 1]]


def test_parse_input_invalid():
    with pytest.raises(ValueError):
        day17.parse_input(".#x\n")


def test_first_cycle(slice0):
    cubes = day17.Cubes(slice0, dims=3)
    cubes.step()

    assert cubes.num_active() == 11


def test_simulate(slice0):
    assert day17.simulate(slice0, dims=3) == 112
    assert day17.simulate(slice0, dims=4) == 848


def test_run_sample(write_input):
    assert day17.run([write_input(SAMPLE)]) == (112, 848)


def test_run_logs_one_timing_line_per_part(write_input, caplog):
    caplog.set_level(logging.INFO)

    day17.run([write_input(SAMPLE)])

    timings = [r.getMessage() for r in caplog.records if "time elapsed" in r.getMessage()]
    assert [t.split("] ", 1)[1].split(": time elapsed")[0] for t in timings] == ["cubes 1", "cubes 2"]
