"""
Day 10: Adapter Array

Adapters chain when joltages differ by 1 to 3. With the outlet (0) and the
device (max + 3) added and everything sorted, the adapters form a DAG that
is already topologically ordered:

  paths[n-1] = 1
  paths[i]   = sum of paths[j] for j in i+1..i+3 with a[j] - a[i] <= 3

paths[0] is the number of distinct arrangements.
"""

import logging
from typing import List, Tuple

import numpy as np

from aoc.util import read_file_text


def chain(raw: List[int]) -> np.ndarray:
    """Sorted joltages with the outlet and device appended."""
    adapters = np.sort(np.array([0] + raw, dtype=np.int64))
    return np.append(adapters, adapters[-1] + 3)


def diffs_distribution(adapters: np.ndarray) -> np.ndarray:
    """Counts of 1-, 2- and 3-jolt differences."""
    diffs = np.diff(adapters)
    if np.any((diffs < 1) | (diffs > 3)):
        raise ValueError("adapters cannot be chained")
    return np.bincount(diffs - 1, minlength=3)


def count_paths(adapters: np.ndarray) -> int:
    n = len(adapters)
    paths = [0] * n
    paths[n - 1] = 1

    for i in range(n - 2, -1, -1):
        for j in range(i + 1, min(i + 4, n)):
            if adapters[j] - adapters[i] > 3:
                break
            paths[i] += paths[j]

    return paths[0]


def run(args: List[str]) -> Tuple[int, int]:
    adapters = chain([int(line) for line in read_file_text(args[0]).split()])

    # Part 1
    distr = diffs_distribution(adapters)
    logging.info(f"diffs distribution: {distr.tolist()}")
    part1 = int(distr[0]) * int(distr[2])

    # Part 2
    part2 = count_paths(adapters)

    return part1, part2
