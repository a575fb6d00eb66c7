"""
Day 11: Seating System

A cellular automaton over a seat layout (L = seat, . = floor). Every step,
simultaneously:
  - an empty seat with no occupied neighbours becomes occupied
  - an occupied seat with too many occupied neighbours becomes empty
Floor never changes. Both parts run until the layout stops changing.

Part 1 (Layout): neighbours are the 8 adjacent cells, >= 4 empties a seat.
Counts come from summing 8 shifted views of a zero-bordered array.

Part 2 (SightLayout): neighbours are the first seat visible in each of the
8 directions, >= 5 empties a seat. Neighbour indices are precomputed once
into a (num_seats, 8) table padded with a sentinel slot that is always empty.
"""

import logging
from typing import List, Tuple

import numpy as np

from aoc.timer import Timer
from aoc.util import read_file_text

DIRECTIONS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]


def parse_seats(text: str) -> np.ndarray:
    """
    Parse the layout into a boolean seat mask of shape (n, m).

    Raises:
        ValueError: On characters other than 'L' and '.'
    """
    lines = [line for line in text.splitlines() if line]
    for line in lines:
        for c in line:
            if c not in "L.":
                raise ValueError(f"unexpected char: {c}")
    return np.array([[c == 'L' for c in line] for line in lines], dtype=bool)


def render(seats: np.ndarray, occupied: np.ndarray) -> str:
    rows = []
    for seat_row, occ_row in zip(seats, occupied):
        rows.append("".join(
            '#' if occ else ('L' if seat else '.')
            for seat, occ in zip(seat_row, occ_row)
        ))
    return "\n".join(rows)


class Layout:
    """Adjacent-neighbour automaton."""

    def __init__(self, seats: np.ndarray):
        n, m = seats.shape
        self.floor_mask = seats.astype(np.uint8)
        # include border of 0's; initial layout is all empty
        self.occupied = np.zeros((n + 2, m + 2), dtype=np.uint8)
        self.scratch = np.zeros((n, m), dtype=np.uint8)

    @property
    def inner(self) -> np.ndarray:
        return self.occupied[1:-1, 1:-1]

    def count_occupied(self) -> int:
        return int(self.occupied.sum())

    def step(self) -> bool:
        """Advance one step. Returns True if any seat changed."""
        neigh = self.scratch
        neigh.fill(0)

        for di, dj in DIRECTIONS:
            neigh += self.occupied[1 + di:self.occupied.shape[0] - 1 + di,
                                   1 + dj:self.occupied.shape[1] - 1 + dj]

        occupied = self.inner
        new = ((occupied == 0) & (neigh == 0)) | ((occupied == 1) & (neigh < 4))
        # Floor tiles should remain floor tiles
        new = new.astype(np.uint8) * self.floor_mask

        changed = not np.array_equal(new, occupied)
        occupied[...] = new
        return changed


class SightLayout:
    """Line-of-sight automaton over a precomputed neighbour table."""

    def __init__(self, seats: np.ndarray):
        self.seats = seats
        self.seat_coords = np.argwhere(seats)
        self.neighbor_indices = self.build_neighbor_indices(seats, self.seat_coords)
        # one extra slot at the end is the always-empty sentinel
        self.occupied = np.zeros(len(self.seat_coords) + 1, dtype=np.uint8)

    @staticmethod
    def build_neighbor_indices(seats: np.ndarray, seat_coords: np.ndarray) -> np.ndarray:
        """For each seat, the index of the first seat visible in each direction."""
        nrows, ncols = seats.shape
        seat_index = np.full(seats.shape, -1, dtype=np.int64)
        seat_index[seats] = np.arange(len(seat_coords))

        sentinel = len(seat_coords)
        table = np.full((len(seat_coords), len(DIRECTIONS)), sentinel, dtype=np.int64)

        for idx, (r, c) in enumerate(seat_coords):
            for d, (dr, dc) in enumerate(DIRECTIONS):
                i, j = r + dr, c + dc
                while 0 <= i < nrows and 0 <= j < ncols:
                    if seats[i, j]:
                        table[idx, d] = seat_index[i, j]
                        break
                    i += dr
                    j += dc

        return table

    def count_occupied(self) -> int:
        return int(self.occupied[:-1].sum())

    def step(self) -> bool:
        """Advance one step. Returns True if any seat changed."""
        occupied = self.occupied[:-1]
        num_neighbors = self.occupied[self.neighbor_indices].sum(axis=1)
        new = ((occupied == 1) & (num_neighbors < 5)) | ((occupied == 0) & (num_neighbors == 0))
        new = new.astype(np.uint8)

        changed = not np.array_equal(new, occupied)
        self.occupied[:-1] = new
        return changed

    def grid(self) -> np.ndarray:
        out = np.zeros(self.seats.shape, dtype=np.uint8)
        out[self.seats] = self.occupied[:-1]
        return out


def settle(layout) -> int:
    """Step until nothing changes; returns the number of steps taken."""
    iters = 1
    while layout.step():
        iters += 1
    return iters


def part1(seats: np.ndarray) -> int:
    layout = Layout(seats)
    iters = settle(layout)
    logging.info(f"part 1 settled after {iters} steps")
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug("\n" + render(seats, layout.inner))
    return layout.count_occupied()


def part2(seats: np.ndarray) -> int:
    layout = SightLayout(seats)
    iters = settle(layout)
    logging.info(f"part 2 settled after {iters} steps")
    if logging.getLogger().isEnabledFor(logging.DEBUG):
        logging.debug("\n" + render(seats, layout.grid()))
    return layout.count_occupied()


def run(args: List[str]) -> Tuple[int, int]:
    seats = parse_seats(read_file_text(args[0]))

    with Timer("part1"):
        occupied1 = part1(seats)

    with Timer("part2"):
        occupied2 = part2(seats)

    return occupied1, occupied2
