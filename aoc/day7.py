"""
Day 7: Handy Haversacks

Bag rules form a weighted DAG: an edge bag -> inner with weight n means
"bag contains n inner bags".

  - containers: nodes that reach the target (DFS on the reversed graph)
  - contained:  contained(i) = sum over edges (i, j) of w_ij * (1 + contained(j))
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from aoc.util import read_file_text

TARGET_BAG = "shiny gold"


@dataclass
class Rule:
    bag: str
    contains: List[Tuple[int, str]] = field(default_factory=list)


def parse_rule(s: str) -> Rule:
    """Parse ``light red bags contain 1 bright white bag, 2 muted yellow bags.``"""
    try:
        bag, rest = s.split(" bags contain ")
    except ValueError as err:
        raise ValueError(f"invalid rule: {s!r}") from err

    rule = Rule(bag)
    rest = rest.rstrip('.')
    if rest == "no other bags":
        return rule

    for part in rest.split(", "):
        if part.endswith(" bags"):
            part = part[:-len(" bags")]
        elif part.endswith(" bag"):
            part = part[:-len(" bag")]
        else:
            raise ValueError(f"invalid bag: {part!r}")

        num, _, inner = part.partition(' ')
        rule.contains.append((int(num), inner))

    return rule


class Rules:
    """Bag graph indexed by bag name."""

    def __init__(self, raw_rules: List[Rule]):
        self.raw_rules = raw_rules
        self.graph: Dict[str, List[Tuple[int, str]]] = {
            rule.bag: rule.contains for rule in raw_rules
        }
        self.reversed: Dict[str, List[str]] = {rule.bag: [] for rule in raw_rules}
        for rule in raw_rules:
            for _, inner in rule.contains:
                if inner not in self.graph:
                    raise ValueError(f"no rule for bag: {inner!r}")
                self.reversed[inner].append(rule.bag)

    @classmethod
    def from_str(cls, text: str) -> "Rules":
        return cls([parse_rule(line) for line in text.splitlines() if line])

    def count_containers_of(self, bag: str) -> int:
        """Number of distinct bags that eventually contain `bag`."""
        seen: Set[str] = {bag}
        stack = [bag]
        while stack:
            node = stack.pop()
            for outer in self.reversed[node]:
                if outer not in seen:
                    seen.add(outer)
                    stack.append(outer)
        # Don't include the initial bag
        return len(seen) - 1

    def count_contained_of(self, bag: str) -> int:
        """Number of bags inside one `bag`."""
        contained: Dict[str, int] = {}

        def visit(node: str) -> int:
            if node not in contained:
                contained[node] = sum(
                    num * (1 + visit(inner)) for num, inner in self.graph[node]
                )
            return contained[node]

        return visit(bag)


def run(args: List[str]) -> Tuple[int, int]:
    rules = Rules.from_str(read_file_text(args[0]))

    containers = rules.count_containers_of(TARGET_BAG)
    contained = rules.count_contained_of(TARGET_BAG)

    logging.info(f"rules={len(rules.raw_rules)}, containers={containers}, contained={contained}")
    return containers, contained
