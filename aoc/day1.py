"""
Day 1: Report Repair

Find the entries of an expense report that sum to 2020.
"""

import logging
from typing import List, Optional, Set, Tuple

from aoc.timer import timed
from aoc.util import read_file_bytes, split_bytes_lines

YEAR = 2020


def parse_entries(data: bytes) -> Set[int]:
    entries = set()
    for line in split_bytes_lines(data):
        try:
            entries.add(int(line))
        except ValueError as err:
            raise ValueError(f"invalid number: {line!r}") from err
    return entries


def two_sum(entries: Set[int], total: int) -> Optional[Tuple[int, int]]:
    """Return a pair (a, b) of entries with a + b == total, or None."""
    for a in sorted(entries):
        if a > total:
            continue
        b = total - a
        if b in entries:
            return a, b
    return None


def three_sum(entries: Set[int], total: int) -> Optional[Tuple[int, int, int]]:
    """Return a triple (a, b, c) of entries with a + b + c == total, or None."""
    for a in sorted(entries):
        pair = two_sum(entries, total - a)
        if pair is not None:
            return (a,) + pair
    return None


def run(args: List[str]) -> Tuple[int, int]:
    entries = parse_entries(read_file_bytes(args[0]))

    pair = timed("two_sum", two_sum, entries, YEAR)
    if pair is None:
        raise ValueError(f"no two entries sum to {YEAR}")
    a, b = pair
    logging.info(f"two_sum: a: {a}, b: {b}, a * b: {a * b}")

    triple = timed("three_sum", three_sum, entries, YEAR)
    if triple is None:
        raise ValueError(f"no three entries sum to {YEAR}")
    a, b, c = triple
    logging.info(f"three_sum: a: {a}, b: {b}, c: {c}, a * b * c: {a * b * c}")

    return pair[0] * pair[1], a * b * c
