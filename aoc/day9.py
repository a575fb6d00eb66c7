"""
Day 9: Encoding Error

After a preamble, every number must be the sum of two distinct numbers
among the previous window. Part 1 finds the first that is not; part 2
finds a contiguous run summing to it.
"""

import logging
from collections import Counter, deque
from typing import List, Optional, Tuple

from aoc.util import read_file_text

PREAMBLE_LEN = 25


def has_two_sum(window: Counter, total: int) -> bool:
    for x in window:
        if x >= total:
            continue
        y = total - x
        if x != y and window[y] > 0:
            return True
    return False


def find_invalid(nums: List[int], preamble_len: int = PREAMBLE_LEN) -> Optional[Tuple[int, int]]:
    """
    Find the first number that is not a sum of two window numbers.

    Returns:
        (index into nums, number), or None if every number is valid
    """
    preamble = deque(nums[:preamble_len])
    window = Counter(preamble)

    for idx in range(preamble_len, len(nums)):
        num = nums[idx]
        if not has_two_sum(window, num):
            return idx, num

        # remove oldest window entry, add new num
        front = preamble.popleft()
        window[front] -= 1
        if not window[front]:
            del window[front]
        preamble.append(num)
        window[num] += 1

    return None


def find_contiguous_ksum(nums: List[int], total: int) -> List[int]:
    """
    Find a contiguous run of at least two numbers summing to total.

    Numbers are non-negative, so a sliding window works: grow the end until
    the sum passes total, then shrink the start until it drops back.

    Raises:
        ValueError: If no such run exists
    """
    start = 0
    window_sum = 0

    for end, num in enumerate(nums):
        window_sum += num

        while window_sum > total and start < end:
            window_sum -= nums[start]
            start += 1

        if window_sum == total and end > start:
            return nums[start:end + 1]

    raise ValueError(f"no contiguous run sums to {total}")


def run(args: List[str]) -> Tuple[int, int]:
    preamble_len = int(args[1]) if len(args) > 1 else PREAMBLE_LEN
    nums = [int(line) for line in read_file_text(args[0]).split()]

    # Part 1
    found = find_invalid(nums, preamble_len)
    if found is None:
        raise ValueError("no invalid number")
    invalid_idx, invalid_num = found
    logging.info(f"invalid number {invalid_num} at index {invalid_idx}")

    # Part 2
    ksum = find_contiguous_ksum(nums[:invalid_idx], invalid_num)
    lo, hi = min(ksum), max(ksum)
    logging.info(f"run of {len(ksum)}: min={lo}, max={hi}")

    return invalid_num, lo + hi
