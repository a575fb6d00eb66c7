import numpy as np
import pytest

from aoc import day16

SAMPLE_1 = """
class: 1-3 or 5-7
row: 6-11 or 33-44
seat: 13-40 or 45-50

your ticket:
7,1,14

nearby tickets:
7,3,47
40,4,50
55,2,20
38,6,12
"""

SAMPLE_2 = """
class: 0-1 or 4-19
row: 0-5 or 8-19
seat: 0-13 or 16-19

your ticket:
11,12,13

nearby tickets:
3,9,18
15,1,5
5,14,9
"""


@pytest.mark.parametrize("ranges, merged", [
    ([], []),
    ([(12, 13), (5, 10)], [(5, 10), (12, 13)]),
    ([(11, 13), (9, 11), (5, 10)], [(5, 13)]),
    ([(12, 13), (9, 11), (5, 10)], [(5, 13)]),
    ([(12, 13), (9, 11), (5, 7)], [(5, 7), (9, 13)]),
    ([(10, 11), (8, 13), (3, 6)], [(3, 6), (8, 13)]),
])
def test_range_set_merge(ranges, merged):
    assert day16.RangeSet(ranges).merged == merged


def test_range_set_contains():
    range_set = day16.RangeSet([(1, 3), (5, 7)])

    assert range_set.contains(3)
    assert not range_set.contains(4)
    assert range_set.contains_array(np.array([0, 1, 4, 7])).tolist() == [False, True, False, True]


def test_parse_rule():
    rule = day16.parse_rule("departure location: 26-724 or 743-964")

    assert rule == day16.Rule("departure location", ((26, 724), (743, 964)))
    assert rule.is_valid_for(724)
    assert not rule.is_valid_for(725)


def test_parse_rule_invalid():
    with pytest.raises(ValueError):
        day16.parse_rule("class: 1-3")


def test_parse_ticket():
    assert day16.parse_ticket("7,1,14") == [7, 1, 14]
    with pytest.raises(ValueError):
        day16.parse_ticket("7,,14")


def test_parse_data():
    data = day16.parse_data(SAMPLE_1)

    assert [rule.name for rule in data.rules] == ["class", "row", "seat"]
    assert data.my_ticket == [7, 1, 14]
    assert data.other_tickets[2] == [55, 2, 20]


def test_part1():
    assert day16.part1(day16.parse_data(SAMPLE_1)) == 71


def test_valid_rules_map():
    data = day16.parse_data(SAMPLE_2)

    assert day16.valid_rules_map(data) == [(0, [1, 2]), (1, [0, 1]), (2, [0, 1, 2])]


def test_find_satisfying_ruleset():
    candidates = day16.valid_rules_map(day16.parse_data(SAMPLE_2))

    assert day16.find_satisfying_ruleset(candidates) == [1, 0, 2]


def test_find_satisfying_ruleset_impossible():
    with pytest.raises(ValueError):
        day16.find_satisfying_ruleset([(0, [0]), (1, [0])])


def test_run_sample(write_input):
    # no departure fields, so the product is empty
    assert day16.run([write_input(SAMPLE_2)]) == (0, 1)


@pytest.mark.parametrize("mine, nearby", [
    ("11,12,13", "3,9\n15,1\n5,14"),
    ("11,12", "3,9,18\n15,1,5\n5,14,9"),
    ("11,12,13", "3,9,18\n15,1,5,7\n5,14,9"),
])
def test_parse_data_rejects_ticket_width(mine, nearby):
    text = (
        "class: 0-1 or 4-19\nrow: 0-5 or 8-19\nseat: 0-13 or 16-19\n\n"
        f"your ticket:\n{mine}\n\nnearby tickets:\n{nearby}\n"
    )

    with pytest.raises(ValueError, match="expected 3"):
        day16.parse_data(text)
