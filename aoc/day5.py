"""
Day 5: Binary Boarding

A boarding pass is a 10-bit number: seven row bits (F=0, B=1) followed by
three column bits (L=0, R=1). The seat id is row * 8 + col, which is just
the pass read as a binary number.
"""

import logging
from typing import List, Tuple

import numpy as np

from aoc.util import read_file_text

POSITION_LEN = 10
COL_LEN = 3
COL_MASK = (1 << COL_LEN) - 1

_BITS = str.maketrans("FBLR", "0101")


def parse_position(s: str) -> int:
    """Decode a boarding pass into its 10-bit position."""
    s = s[:POSITION_LEN]
    if len(s) != POSITION_LEN or set(s) - set("FBLR"):
        raise ValueError(f"invalid boarding pass: {s!r}")
    return int(s.translate(_BITS), 2)


def row(position: int) -> int:
    return position >> COL_LEN


def col(position: int) -> int:
    return position & COL_MASK


def seat_id(position: int) -> int:
    return row(position) * 8 + col(position)


def find_my_seat(seat_ids: np.ndarray) -> int:
    """
    Find the single missing id between two consecutive sorted seat ids.

    Raises:
        ValueError: If the ids have no gap
    """
    ids = np.sort(seat_ids)
    gaps = np.flatnonzero(np.diff(ids) != 1)
    if len(gaps) == 0:
        raise ValueError("Failed to find my seat id")
    return int(ids[gaps[0]]) + 1


def run(args: List[str]) -> Tuple[int, int]:
    lines = read_file_text(args[0]).split()
    seat_ids = np.array([seat_id(parse_position(line)) for line in lines], dtype=np.int32)
    if len(seat_ids) == 0:
        raise ValueError("No seats")

    max_seat_id = int(seat_ids.max())
    my_id = find_my_seat(seat_ids)

    logging.info(f"seats={len(seat_ids)}, max_seat_id={max_seat_id}, my_id={my_id}")
    return max_seat_id, my_id
