"""
Day 6: Custom Customs

Each person's answers are a set of the letters a-z, stored as a 26-bit
integer. A group's "anyone" count is the union, its "everyone" count the
intersection.
"""

import logging
from typing import Iterable, List, Tuple

from aoc.util import read_file_text, split_blocks

RESPONSE_WIDTH = 26
RESPONSE_NONE = 0
RESPONSE_ALL = (1 << RESPONSE_WIDTH) - 1


def response_set(line: str) -> int:
    """Encode one person's answers as a bitset."""
    bits = 0
    for c in line:
        idx = ord(c) - ord('a')
        if not 0 <= idx < RESPONSE_WIDTH:
            raise ValueError(f"unexpected answer: {c!r}")
        bits |= 1 << idx
    return bits


def count_yes(bits: int) -> int:
    return bin(bits).count("1")


def group_counts(responses: Iterable[int]) -> Tuple[int, int]:
    """Return (union size, intersection size) of a group's responses."""
    union_agg = RESPONSE_NONE
    intersect_agg = RESPONSE_ALL
    for response in responses:
        union_agg |= response
        intersect_agg &= response
    return count_yes(union_agg), count_yes(intersect_agg)


def run(args: List[str]) -> Tuple[int, int]:
    union_yes_counts = 0
    intersect_yes_counts = 0

    for group in split_blocks(read_file_text(args[0])):
        responses = [response_set(line) for line in group.split()]
        union_count, intersect_count = group_counts(responses)
        union_yes_counts += union_count
        intersect_yes_counts += intersect_count

    logging.info(f"union_yes_counts={union_yes_counts}, intersect_yes_counts={intersect_yes_counts}")
    return union_yes_counts, intersect_yes_counts
