"""
Day 8: Handheld Halting

A boot program of acc/jmp/nop instructions loops forever. Part 1 reports the
accumulator just before any instruction runs a second time. Part 2 repairs
exactly one instruction (jmp <-> nop) so the program terminates.

The repair is found without brute-force re-execution:

  1. find leaders (first instruction, jump targets, instructions after a jump)
  2. split the program into basic blocks [leader_i, leader_i+1)
  3. build the basic block graph (fallthrough edges + jmp edges)
  4. source connectivity: blocks reachable from the first block
  5. terminal connectivity: blocks that reach the exit, a node past the last
     block standing for execution stepping off the end of the program
  6. walk source-connected blocks for a jmp/nop whose flipped edge lands in a
     terminal-connected block

Removing an edge can never improve source -> terminal connectivity, so only
the edge a repair adds needs checking.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from aoc.timer import timed
from aoc.util import read_file_text

OPS = ("acc", "jmp", "nop")

BasicBlock = range
BasicBlockGraph = List[List[int]]


@dataclass
class Instr:
    op: str
    arg: int

    def is_jmp(self) -> bool:
        return self.op == "jmp"

    def is_nop(self) -> bool:
        return self.op == "nop"

    def repair(self):
        """Flip jmp <-> nop in place."""
        if self.op == "jmp":
            self.op = "nop"
        elif self.op == "nop":
            self.op = "jmp"
        else:
            raise ValueError("Can't repair acc instruction")

    def __str__(self) -> str:
        return f"{self.op} {self.arg:+d}"


def parse_instruction(s: str) -> Instr:
    op, _, val = s.partition(' ')
    if op not in OPS:
        raise ValueError(f"Invalid instruction: {s!r}")
    try:
        return Instr(op, int(val))
    except ValueError as err:
        raise ValueError(f"Invalid value: {s!r}") from err


def parse_instructions(program: str) -> List[Instr]:
    return [parse_instruction(line.strip()) for line in program.splitlines() if line.strip()]


def evaluate(instrs: List[Instr]) -> Tuple[bool, int]:
    """
    Run the program.

    Returns:
        (True, acc) if the program terminates by stepping just past the last
        instruction, (False, acc) when an instruction is about to execute a
        second time.
    """
    visited = [False] * len(instrs)
    ip = 0
    acc = 0

    while True:
        if ip == len(instrs):
            return True, acc
        if not 0 <= ip < len(instrs):
            raise ValueError(f"instruction pointer out of range: {ip}")

        if visited[ip]:
            return False, acc
        visited[ip] = True

        instr = instrs[ip]
        if instr.op == "acc":
            acc += instr.arg
            ip += 1
        elif instr.op == "jmp":
            ip += instr.arg
        else:
            ip += 1


def _jump_target(instrs: List[Instr], idx: int, include_nop: bool) -> Optional[int]:
    instr = instrs[idx]
    if instr.is_jmp() or (include_nop and instr.is_nop()):
        target = idx + instr.arg
        if 0 <= target < len(instrs):
            return target
    return None


def leaders(instrs: List[Instr], include_nop: bool) -> List[int]:
    """
    Find all basic block leaders, sorted.

    A leader is the first instruction, the target of a jmp, or the instruction
    right after a jmp. With include_nop, nops are treated as jmps.
    """
    found: Set[int] = set()

    for idx in range(len(instrs)):
        if idx == 0:
            found.add(0)
        else:
            prev = instrs[idx - 1]
            if prev.is_jmp() or (include_nop and prev.is_nop()):
                found.add(idx)

        target = _jump_target(instrs, idx, include_nop)
        if target is not None:
            found.add(target)

    return sorted(found)


def basic_blocks(leader_indices: List[int], terminal_idx: int) -> List[BasicBlock]:
    """Basic blocks are the half-open ranges between consecutive leaders."""
    bounds = leader_indices + [terminal_idx]
    return [range(start, end) for start, end in zip(bounds, bounds[1:])]


def basic_block_map(blocks: List[BasicBlock]) -> List[int]:
    """Map instruction index -> index of the block containing it."""
    return [block_idx for block_idx, block in enumerate(blocks) for _ in block]


def basic_block_graph(
    instrs: List[Instr],
    blocks: List[BasicBlock],
    block_map: List[int],
) -> BasicBlockGraph:
    """
    Build the adjacency lists of the basic block graph.

    Two kinds of edges:
      - fallthrough: the instruction before a block's leader is not a jmp,
        so the previous block falls into this one
      - jmp: the block ends in a jmp whose target is inside the program
    """
    graph: BasicBlockGraph = [[] for _ in blocks]

    for block_idx, block in enumerate(blocks):
        leader_idx = block.start
        end_idx = block.stop - 1

        if leader_idx != 0 and not instrs[leader_idx - 1].is_jmp():
            graph[block_idx - 1].append(block_idx)

        end = instrs[end_idx]
        if end.is_jmp():
            target_idx = end_idx + end.arg
            if 0 <= target_idx < len(instrs):
                graph[block_idx].append(block_map[target_idx])

    return graph


def graph_edges(graph: BasicBlockGraph) -> List[Tuple[int, int]]:
    return sorted((src, dst) for src, targets in enumerate(graph) for dst in targets)


def reversed_graph(graph: BasicBlockGraph) -> BasicBlockGraph:
    rev: BasicBlockGraph = [[] for _ in graph]
    for src, targets in enumerate(graph):
        for dst in targets:
            rev[dst].append(src)
    return rev


def reachable(graph: BasicBlockGraph, start: int) -> Set[int]:
    """Blocks reachable from start by DFS, start included."""
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for nxt in graph[node]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen


def source_connectivity(graph: BasicBlockGraph) -> Set[int]:
    """Blocks that executing from the program start can reach."""
    return reachable(graph, 0)


def terminal_connectivity(graph: BasicBlockGraph) -> Set[int]:
    """Blocks from which execution eventually reaches the last block."""
    return reachable(reversed_graph(graph), len(graph) - 1)


def with_exit_node(
    instrs: List[Instr],
    blocks: List[BasicBlock],
    graph: BasicBlockGraph,
) -> BasicBlockGraph:
    """
    Copy of graph with an exit node appended at index len(blocks).

    The last block falls through to the exit unless it ends in a jmp, and any
    jmp landing exactly one past the last instruction jumps to it. Reaching
    the last block is not enough to terminate: it may end in a backward jmp.
    """
    exit_node = len(blocks)
    out: BasicBlockGraph = [list(targets) for targets in graph] + [[]]

    for block_idx, block in enumerate(blocks):
        end_idx = block.stop - 1
        end = instrs[end_idx]
        if end.is_jmp() and end_idx + end.arg == len(instrs):
            out[block_idx].append(exit_node)

    if blocks and not instrs[blocks[-1].stop - 1].is_jmp():
        out[exit_node - 1].append(exit_node)

    return out


def is_connected(graph: BasicBlockGraph) -> bool:
    return (len(graph) - 1) in source_connectivity(graph)


def find_repair(instrs: List[Instr]) -> Optional[int]:
    """
    Find the single jmp or nop that, when repaired, lets the program terminate.

    Returns:
        Index of the instruction to repair, or None when the program already
        terminates

    Raises:
        ValueError: If no single repair connects source to terminal
    """
    terminal_idx = len(instrs)
    blocks = basic_blocks(leaders(instrs, include_nop=True), terminal_idx)
    block_map = basic_block_map(blocks)
    graph = with_exit_node(instrs, blocks, basic_block_graph(instrs, blocks, block_map))

    # Already connected; no repair needed.
    if is_connected(graph):
        return None

    source = source_connectivity(graph)
    terminal = terminal_connectivity(graph)

    for block_idx in sorted(source):
        block = blocks[block_idx]
        # Nops split blocks too, so a block's only jmp/nop is its last instruction
        instr_idx = block.stop - 1
        instr = instrs[instr_idx]

        if instr.is_jmp():
            # jmp -> nop adds the fallthrough edge into the next block
            next_block = block_idx + 1
            if next_block == len(blocks) or next_block in terminal:
                return instr_idx
        elif instr.is_nop():
            # nop -> jmp adds the jmp edge
            target_idx = instr_idx + instr.arg
            if target_idx == terminal_idx:
                return instr_idx
            if 0 <= target_idx < terminal_idx and block_map[target_idx] in terminal:
                return instr_idx

    raise ValueError("no single repair makes the program terminate")


def run(args: List[str]) -> Tuple[int, int]:
    instrs = parse_instructions(read_file_text(args[0]))

    # Part 1
    terminated, acc_loop = evaluate(instrs)
    if terminated:
        raise ValueError("Part 1 should loop")
    logging.info(f"acc before loop: {acc_loop}")

    # Part 2
    repair_idx = timed("find_repair", find_repair, instrs)
    if repair_idx is not None:
        logging.info(f"repair instruction {repair_idx}: {instrs[repair_idx]}")
        instrs[repair_idx].repair()

    terminated, acc_end = evaluate(instrs)
    if not terminated:
        raise ValueError("Should terminate after repair")
    logging.info(f"acc after repair: {acc_end}")

    return acc_loop, acc_end
