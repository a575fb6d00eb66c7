"""
Day 3: Toboggan Trajectory

The map is a grid of open squares (.) and trees (#) that repeats to the
right forever. Count the trees hit while descending on a fixed slope.
"""

import logging
from typing import List, Tuple

import numpy as np

from aoc.util import read_file_bytes, split_bytes_lines

TREE = ord('#')
OPEN = ord('.')

SLOPES: List[Tuple[int, int]] = [(1, 1), (3, 1), (5, 1), (7, 1), (1, 2)]


def parse_geology(data: bytes) -> np.ndarray:
    """
    Parse the map into a boolean tree mask of shape (H, W).

    Raises:
        ValueError: On ragged rows or characters other than '.' and '#'
    """
    rows = [np.frombuffer(line, dtype=np.uint8) for line in split_bytes_lines(data)]
    if not rows:
        raise ValueError("empty map")
    if len({len(row) for row in rows}) != 1:
        raise ValueError("map rows have different widths")

    grid = np.stack(rows)
    if not np.all((grid == TREE) | (grid == OPEN)):
        raise ValueError("unexpected character in map")
    return grid == TREE


def count_trees(trees: np.ndarray, dx: int, dy: int) -> int:
    """Count trees on the path starting top-left and moving (dx, dy) per step."""
    H, W = trees.shape
    rows = np.arange(0, H, dy)
    cols = (np.arange(len(rows)) * dx) % W
    return int(trees[rows, cols].sum())


def run(args: List[str]) -> Tuple[int, int]:
    trees = parse_geology(read_file_bytes(args[0]))

    product = 1
    for dx, dy in SLOPES:
        count = count_trees(trees, dx, dy)
        logging.info(f"dx: {dx}, dy: {dy}, count: {count}")
        product *= count

    return count_trees(trees, 3, 1), product
