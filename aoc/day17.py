"""
Day 17: Conway Cubes

Game of life on an n-dimensional grid seeded from a 2-D slice:
  - an active cube stays active with 2 or 3 active neighbours
  - an inactive cube becomes active with exactly 3 active neighbours

The grid can grow by at most one cell per side per cycle, so the array is
allocated once with MAX_ITERS of growth room plus a 1-cell zero border.
Neighbour counts sum the 3^n shifted views of the padded array (the cube
itself included, then subtracted).
"""

import itertools
import logging
from typing import List, Tuple

import numpy as np

from aoc.timer import Timer
from aoc.util import read_file_text

BORDER_SIZE = 1
MAX_ITERS = 6


def parse_input(text: str) -> np.ndarray:
    """Parse the initial slice into a uint8 array of shape (rows, cols)."""
    rows = []
    for line in text.splitlines():
        if not line:
            continue
        row = []
        for c in line:
            if c == '#':
                row.append(1)
            elif c == '.':
                row.append(0)
            else:
                raise ValueError(f"unexpected character: '{c}'")
        rows.append(row)
    if len({len(row) for row in rows}) != 1:
        raise ValueError("initial slice rows have different widths")
    return np.array(rows, dtype=np.uint8)


class Cubes:
    """Active cubes in `dims` dimensions; the seed slice spans the last two axes."""

    def __init__(self, slice0: np.ndarray, dims: int, max_iters: int = MAX_ITERS):
        if dims < 2:
            raise ValueError("need at least 2 dimensions")
        pad = BORDER_SIZE + max_iters
        x_len, y_len = slice0.shape
        shape = (2 * pad + 1,) * (dims - 2) + (2 * pad + x_len, 2 * pad + y_len)

        self.dims = dims
        self.active = np.zeros(shape, dtype=np.uint8)
        self.scratch = np.zeros(tuple(n - 2 for n in shape), dtype=np.uint8)

        center = tuple(n // 2 for n in shape[:-2])
        self.active[center + (slice(pad, pad + x_len), slice(pad, pad + y_len))] = slice0

    def num_active(self) -> int:
        return int(self.active.sum())

    def step(self):
        neigh = self.scratch
        neigh.fill(0)

        for offsets in itertools.product((0, 1, 2), repeat=self.dims):
            view = tuple(
                slice(off, n - 2 + off) for off, n in zip(offsets, self.active.shape)
            )
            neigh += self.active[view]

        inner_view = (slice(1, -1),) * self.dims
        inner = self.active[inner_view]
        neigh -= inner

        new = ((inner == 1) & ((neigh == 2) | (neigh == 3))) | ((inner == 0) & (neigh == 3))
        inner[...] = new


def simulate(slice0: np.ndarray, dims: int, cycles: int = MAX_ITERS) -> int:
    cubes = Cubes(slice0, dims, max_iters=cycles)
    for _ in range(cycles):
        cubes.step()
    logging.info(f"{dims}-D: {cubes.num_active()} active after {cycles} cycles")
    return cubes.num_active()


def run(args: List[str]) -> Tuple[int, int]:
    slice0 = parse_input(read_file_text(args[0]))

    # part 1
    with Timer("cubes 1"):
        answer1 = simulate(slice0, dims=3)

    # part 2
    with Timer("cubes 2"):
        answer2 = simulate(slice0, dims=4)

    return answer1, answer2
