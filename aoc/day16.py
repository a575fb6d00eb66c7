"""
Day 16: Ticket Translation

Input has three sections: field rules (``name: a-b or c-d``), your ticket and
nearby tickets.

Part 1: merge every rule range into a sorted, non-overlapping RangeSet and
sum the nearby values it does not contain (the scanning error rate).

Part 2: drop invalid tickets, stack the rest into a (tickets, fields)
matrix and find, for each field column, which rules accept every value.
A backtracking search then assigns one distinct rule per field; sorting
fields by their number of candidate rules first makes it finish almost
instantly.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np

from aoc.timer import timed
from aoc.util import read_file_text

Range = Tuple[int, int]  # inclusive

RULE_RE = re.compile(r"([^:\n]+): ([0-9]+)-([0-9]+) or ([0-9]+)-([0-9]+)")


class RangeSet:
    """Sorted, merged inclusive ranges."""

    def __init__(self, unsorted: Iterable[Range]):
        merged: List[Range] = []
        for start, end in sorted(unsorted):
            # "eat" ranges that overlap or touch the current one
            if merged and start <= merged[-1][1] + 1:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        self.merged = merged

    def contains(self, value: int) -> bool:
        return any(start <= value <= end for start, end in self.merged)

    def contains_array(self, values: np.ndarray) -> np.ndarray:
        mask = np.zeros(values.shape, dtype=bool)
        for start, end in self.merged:
            mask |= (values >= start) & (values <= end)
        return mask


@dataclass(frozen=True)
class Rule:
    name: str
    ranges: Tuple[Range, Range]

    def is_valid_for(self, field: int) -> bool:
        (lo1, hi1), (lo2, hi2) = self.ranges
        return lo1 <= field <= hi1 or lo2 <= field <= hi2

    def valid_mask(self, values: np.ndarray) -> np.ndarray:
        (lo1, hi1), (lo2, hi2) = self.ranges
        return ((values >= lo1) & (values <= hi1)) | ((values >= lo2) & (values <= hi2))


@dataclass
class Data:
    rules: List[Rule]
    my_ticket: List[int]
    other_tickets: List[List[int]]

    def range_set(self) -> RangeSet:
        return RangeSet(r for rule in self.rules for r in rule.ranges)


def parse_rule(s: str) -> Rule:
    m = RULE_RE.fullmatch(s)
    if not m:
        raise ValueError(f"Failed to parse rule: {s!r}")
    name = m.group(1)
    lo1, hi1, lo2, hi2 = (int(g) for g in m.groups()[1:])
    return Rule(name, ((lo1, hi1), (lo2, hi2)))


def parse_ticket(s: str) -> List[int]:
    try:
        return [int(field) for field in s.split(',')]
    except ValueError as err:
        raise ValueError(f"Failed to parse ticket: {s!r}") from err


def parse_data(text: str) -> Data:
    sections = text.strip().split("\n\n")
    if len(sections) != 3:
        raise ValueError("Failed to parse data: expected rules, your ticket, nearby tickets")
    rules_str, mine_str, nearby_str = sections

    mine_lines = mine_str.splitlines()
    nearby_lines = nearby_str.splitlines()
    if mine_lines[0] != "your ticket:" or nearby_lines[0] != "nearby tickets:":
        raise ValueError("Failed to parse data: missing section header")

    rules = [parse_rule(line) for line in rules_str.splitlines()]
    my_ticket = parse_ticket(mine_lines[1])
    other_tickets = [parse_ticket(line) for line in nearby_lines[1:] if line]

    # every ticket has one value per rule
    for ticket in [my_ticket] + other_tickets:
        if len(ticket) != len(rules):
            raise ValueError(
                f"Failed to parse data: ticket has {len(ticket)} fields, expected {len(rules)}"
            )

    return Data(rules, my_ticket, other_tickets)


def part1(data: Data) -> int:
    range_set = data.range_set()
    error_rate = sum(
        field
        for ticket in data.other_tickets
        for field in ticket
        if not range_set.contains(field)
    )
    logging.info(f"error_rate={error_rate}")
    return error_rate


def valid_rules_map(data: Data) -> List[Tuple[int, List[int]]]:
    """
    For each field index, the rules valid for every value in that field.

    Returns:
        (field index, candidate rule indices) pairs in field order
    """
    range_set = data.range_set()

    tickets = np.array(data.other_tickets, dtype=np.int64).reshape(-1, len(data.rules))
    # remove any tickets with invalid fields
    tickets = tickets[range_set.contains_array(tickets).all(axis=1)]

    # one row per unknown field
    fields = tickets.T

    return [
        (field_idx, [
            rule_idx for rule_idx, rule in enumerate(data.rules)
            if rule.valid_mask(column).all()
        ])
        for field_idx, column in enumerate(fields)
    ]


def _find_rec(
    candidates: List[Tuple[int, List[int]]],
    current: int,
    chosen: List[int],
) -> bool:
    if current == len(candidates):
        return True

    for rule_idx in candidates[current][1]:
        # skip already chosen rules
        if rule_idx in chosen:
            continue

        chosen.append(rule_idx)
        if _find_rec(candidates, current + 1, chosen):
            return True
        chosen.pop()

    return False


def find_satisfying_ruleset(candidates: List[Tuple[int, List[int]]]) -> List[int]:
    """
    Choose a distinct rule for every field.

    Args:
        candidates: (field index, candidate rule indices) pairs in any order

    Returns:
        rule index for each field, indexed by field

    Raises:
        ValueError: If no assignment exists
    """
    ordered = sorted(candidates, key=lambda item: len(item[1]))
    chosen: List[int] = []
    if not _find_rec(ordered, 0, chosen):
        raise ValueError("no satisfying rule assignment")

    unshuffled: List[Optional[int]] = [None] * len(ordered)
    for (field_idx, _), rule_idx in zip(ordered, chosen):
        unshuffled[field_idx] = rule_idx
    return unshuffled


def part2(data: Data) -> int:
    satisfying_rules = find_satisfying_ruleset(valid_rules_map(data))

    product = 1
    for field_idx, rule_idx in enumerate(satisfying_rules):
        name = data.rules[rule_idx].name
        logging.debug(f"field {field_idx}: {name}")
        if name.startswith("departure"):
            product *= data.my_ticket[field_idx]

    return product


def run(args: List[str]) -> Tuple[int, int]:
    data = parse_data(read_file_text(args[0]))

    answer1 = timed("part1", part1, data)
    answer2 = timed("part2", part2, data)

    return answer1, answer2
