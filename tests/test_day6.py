from aoc import day6

SAMPLE = """
abc

a
b
c

ab
ac

a
a
a
a

b
"""


def test_response_set_bits():
    assert day6.response_set("ac") == 0b101
    assert day6.count_yes(day6.response_set("abcxyz")) == 6


def test_group_counts():
    responses = [day6.response_set(s) for s in ("ab", "ac")]

    assert day6.group_counts(responses) == (3, 1)


def test_run_sample(write_input):
    assert day6.run([write_input(SAMPLE)]) == (11, 6)
