"""
Day 13: Shuttle Search

Part 2 asks for the earliest t where bus i (with id n_i) departs at t + i:

  t ≡ -i  (mod n_i)   for every listed bus

The ids are pairwise coprime, so the Chinese Remainder Theorem gives t:

  N   = n_1 * .. * n_k
  N_i = N / n_i
  M_i = modinv(N_i, n_i)
  t   = sum a_i M_i N_i  (mod N)
"""

import logging
from typing import List, Optional, Sequence, Tuple

from aoc.timer import timed
from aoc.util import read_file_text


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    """Find x, y, d with a*x + b*y = d = gcd(a, b)."""
    r_p, r = a, b
    s_p, s = 1, 0
    t_p, t = 0, 1

    while r != 0:
        q = r_p // r
        r_p, r = r, r_p - q * r
        s_p, s = s, s_p - q * s
        t_p, t = t, t_p - q * t

    assert a * s_p + b * t_p == r_p
    return s_p, t_p, r_p


def modinv(a: int, m: int) -> Optional[int]:
    """Inverse of a modulo m, or None when a and m are not coprime."""
    inv_a, _, d = egcd(a, m)
    if d != 1:
        return None
    return inv_a % m


def chinese_remainder_theorem(a: Sequence[int], n: Sequence[int]) -> Optional[int]:
    """Smallest non-negative x with x ≡ a_i (mod n_i) for all i."""
    N = 1
    for n_i in n:
        N *= n_i

    total = 0
    for a_i, n_i in zip(a, n):
        N_i = N // n_i
        M_i = modinv(N_i, n_i)
        if M_i is None:
            return None
        total += a_i * M_i * N_i

    return total % N


def parse_schedule(text: str) -> Tuple[int, List[Optional[int]]]:
    lines = text.split()
    if len(lines) < 2:
        raise ValueError("expected a timestamp line and a bus line")
    earliest_timestamp = int(lines[0])
    buses = [None if slot == "x" else int(slot) for slot in lines[1].split(',')]
    return earliest_timestamp, buses


def part1(earliest_timestamp: int, buses: List[Optional[int]]) -> int:
    """Bus id times minutes waited for the first bus after earliest_timestamp."""
    # f - (t mod f) mod f == -t mod f
    delay, freq = min(
        ((-earliest_timestamp) % freq, freq) for freq in buses if freq is not None
    )
    logging.info(f"bus {freq} arrives after {delay} minutes")
    return delay * freq


def part2(buses: List[Optional[int]]) -> int:
    a = [(-i) % n_i for i, n_i in enumerate(buses) if n_i is not None]
    n = [n_i for n_i in buses if n_i is not None]

    x = chinese_remainder_theorem(a, n)
    if x is None:
        raise ValueError("bus ids are not pairwise coprime")
    return x


def run(args: List[str]) -> Tuple[int, int]:
    earliest_timestamp, buses = parse_schedule(read_file_text(args[0]))

    answer1 = timed("part1", part1, earliest_timestamp, buses)
    answer2 = timed("part2", part2, buses)

    return answer1, answer2
