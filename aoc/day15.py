"""
Day 15: Rambunctious Recitation

The memory game: after the starting numbers, each turn speaks 0 if the
previous number was new, otherwise how many turns apart its last two
utterances were.

last_round[n] holds the turn n was last spoken before the current turn
(0 = never), so each step is one lookup and one store.
"""

import logging
from typing import List, Sequence, Tuple

from aoc.timer import timed
from aoc.util import read_file_text

PART1_ROUND = 2020
PART2_ROUND = 30_000_000


class Game:
    def __init__(self, starting_numbers: Sequence[int]):
        if not starting_numbers:
            raise ValueError("no starting numbers")
        self.round = len(starting_numbers)
        self.prev_num_spoken = starting_numbers[-1]
        self.last_round = [0] * (max(starting_numbers) + 1)
        for round_, num in enumerate(starting_numbers[:-1], start=1):
            self.last_round[num] = round_

    def _reserve(self, size: int):
        if size > len(self.last_round):
            self.last_round.extend([0] * (size - len(self.last_round)))

    def step_until_round(self, round_: int) -> int:
        """Play until turn round_ and return the number spoken on it."""
        # every spoken number is smaller than the turn it is spoken on
        self._reserve(round_)
        last_round = self.last_round
        num = self.prev_num_spoken
        current = self.round

        while current < round_:
            prev = last_round[num]
            last_round[num] = current
            num = current - prev if prev else 0
            current += 1

        self.round = current
        self.prev_num_spoken = num
        return num


def parse_starting_numbers(text: str) -> List[int]:
    line = text.strip().splitlines()[0] if text.strip() else ""
    return [int(slice_) for slice_ in line.split(',') if slice_]


def run(args: List[str]) -> Tuple[int, int]:
    game = Game(parse_starting_numbers(read_file_text(args[0])))

    # part 2 resumes where part 1 stopped
    answer1 = timed("part1", game.step_until_round, PART1_ROUND)
    answer2 = timed("part2", game.step_until_round, PART2_ROUND)

    logging.info(f"round {PART1_ROUND}: {answer1}, round {PART2_ROUND}: {answer2}")
    return answer1, answer2
