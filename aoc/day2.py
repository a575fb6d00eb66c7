"""
Day 2: Password Philosophy

Each line is a policy and a password: ``1-3 a: abcde``.

  - v1: the letter must appear between min and max times
  - v2: exactly one of positions min and max (1-based) holds the letter
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Tuple

from aoc.util import read_file_text

ENTRY_RE = re.compile(r"^([0-9]+)-([0-9]+) ([a-z]): ([a-z]+)$", re.MULTILINE | re.ASCII)


@dataclass(frozen=True)
class PasswordEntry:
    min_reps: int
    max_reps: int
    letter: str
    password: str

    def is_valid_v1(self) -> bool:
        times = self.password.count(self.letter)
        return self.min_reps <= times <= self.max_reps

    def is_valid_v2(self) -> bool:
        c1 = self.password[self.min_reps - 1:self.min_reps]
        c2 = self.password[self.max_reps - 1:self.max_reps]
        return (c1 == self.letter) != (c2 == self.letter)


def parse_entries(text: str) -> List[PasswordEntry]:
    return [
        PasswordEntry(int(lo), int(hi), letter, password)
        for lo, hi, letter, password in ENTRY_RE.findall(text)
    ]


def run(args: List[str]) -> Tuple[int, int]:
    entries = parse_entries(read_file_text(args[0]))

    num_valid_v1 = sum(entry.is_valid_v1() for entry in entries)
    num_valid_v2 = sum(entry.is_valid_v2() for entry in entries)

    logging.info(f"entries={len(entries)}, valid_v1={num_valid_v1}, valid_v2={num_valid_v2}")
    return num_valid_v1, num_valid_v2
