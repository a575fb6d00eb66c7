from aoc import day2

SAMPLE = """
1-3 a: abcde
1-3 b: cdefg
2-9 c: ccccccccc
"""


def test_parse_entries():
    entries = day2.parse_entries(SAMPLE)

    assert entries[0] == day2.PasswordEntry(1, 3, "a", "abcde")
    assert len(entries) == 3


def test_policies():
    first, second, third = day2.parse_entries(SAMPLE)

    assert [e.is_valid_v1() for e in (first, second, third)] == [True, False, True]
    assert [e.is_valid_v2() for e in (first, second, third)] == [True, False, False]


def test_run_sample(write_input):
    assert day2.run([write_input(SAMPLE)]) == (2, 1)
