"""
Day 14: Docking Data

A program of ``mask = <36 chars>`` and ``mem[addr] = value`` lines writes to
a sparse 36-bit memory. A mask is kept as three bit masks: the bits forced
to 1, the bits forced to 0 and the floating (X) bits.

  - v1: the mask applies to values: (value | ones) & ~zeros
  - v2: the mask applies to addresses: ones are forced, and every
    combination of the floating bits is written
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple, Union

from aoc.timer import timed
from aoc.util import read_file_text

BITS = 36
VALUE_MASK = (1 << BITS) - 1

MASK_RE = re.compile(r"mask = ([01X]{%d})" % BITS)
MEM_RE = re.compile(r"mem\[([0-9]+)\] = ([0-9]+)")


@dataclass(frozen=True)
class SetMask:
    one_mask: int
    zero_mask: int

    @property
    def floating_mask(self) -> int:
        return ~(self.one_mask | self.zero_mask) & VALUE_MASK

    def __str__(self) -> str:
        chars = []
        for bit in range(BITS - 1, -1, -1):
            mask = 1 << bit
            if self.one_mask & mask:
                chars.append('1')
            elif self.zero_mask & mask:
                chars.append('0')
            else:
                chars.append('X')
        return "mask = " + "".join(chars)


@dataclass(frozen=True)
class SetMem:
    addr: int
    value: int

    def __str__(self) -> str:
        return f"mem[{self.addr}] = {self.value}"


Action = Union[SetMask, SetMem]


def parse_mask_bits(s: str) -> SetMask:
    one_mask = 0
    zero_mask = 0
    for idx, c in enumerate(s):
        bit = BITS - idx - 1
        if c == '0':
            zero_mask |= 1 << bit
        elif c == '1':
            one_mask |= 1 << bit
    return SetMask(one_mask, zero_mask)


def parse_action(line: str) -> Action:
    m = MASK_RE.fullmatch(line)
    if m:
        return parse_mask_bits(m.group(1))
    m = MEM_RE.fullmatch(line)
    if m:
        return SetMem(int(m.group(1)), int(m.group(2)))
    raise ValueError(f"invalid action: {line!r}")


def parse_all_actions(text: str) -> List[Action]:
    return [parse_action(line.strip()) for line in text.splitlines() if line.strip()]


def mask_permutations(mask: int) -> Iterator[int]:
    """
    Yield every subset of the set bits of mask, in increasing order.

    Example:
        mask_permutations(0b1101) -> 0000 0001 0100 0101 1000 1001 1100 1101
    """
    sub = 0
    while True:
        yield sub
        # next subset: borrow through the unset bits, keep only mask bits
        sub = (sub - mask) & mask
        if sub == 0:
            return


@dataclass
class Memory:
    mem: Dict[int, int] = field(default_factory=dict)
    mask: SetMask = SetMask(0, 0)

    def apply_action_v1(self, action: Action) -> "Memory":
        if isinstance(action, SetMask):
            self.mask = action
        else:
            value = (action.value | self.mask.one_mask) & ~self.mask.zero_mask
            self.mem[action.addr] = value & VALUE_MASK
        return self

    def apply_action_v2(self, action: Action) -> "Memory":
        if isinstance(action, SetMask):
            self.mask = action
        else:
            floating_mask = self.mask.floating_mask
            addr = action.addr | self.mask.one_mask
            # remove the floating bits from the address
            addr &= ~floating_mask
            for floating in mask_permutations(floating_mask):
                self.mem[addr | floating] = action.value
        return self

    def sum(self) -> int:
        return sum(self.mem.values())


def part1(actions: List[Action]) -> int:
    memory = Memory()
    for action in actions:
        memory.apply_action_v1(action)
    logging.info(f"v1: {len(memory.mem)} addresses written")
    return memory.sum()


def part2(actions: List[Action]) -> int:
    memory = Memory()
    for action in actions:
        memory.apply_action_v2(action)
    logging.info(f"v2: {len(memory.mem)} addresses written")
    return memory.sum()


def run(args: List[str]) -> Tuple[int, int]:
    actions = timed("parse_all_actions", parse_all_actions, read_file_text(args[0]))

    answer1 = timed("part1", part1, actions)
    answer2 = timed("part2", part2, actions)

    return answer1, answer2
