"""
Day 19: Monster Messages

Rules form a grammar over "a" and "b". Without loops the grammar is regular,
so rule 0 compiles to a single regex and messages are matched whole.

Part 2 replaces two rules with loops:

  8: 42 | 42 8         ->  (r42)+
  11: 42 31 | 42 11 31  ->  r42{n} r31{n} for n = 1..max_depth

Rule 11 is not regular; it is unrolled up to a depth bound derived from the
longest message and the minimum match lengths of rules 42 and 31 (rule 0
is ``8 11``, so a message needs at least one extra r42 in front). Grammars
without rules 8 and 11 match the same way in both parts.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple, Union

from aoc.timer import Timer, timed
from aoc.util import read_file_text

# A rule is either a terminal character or alternatives of rule-id sequences
Rule = Union[str, List[List[int]]]
Rules = Dict[int, Rule]

LOOP_8 = 8
LOOP_11 = 11
RULE_42 = 42
RULE_31 = 31


def parse_rule(s: str) -> Rule:
    """
    Parse the body of a rule.

    Examples:
        '"a"'              -> 'a'
        '110 61'           -> [[110, 61]]
        '110 61 | 92 103'  -> [[110, 61], [92, 103]]
    """
    s = s.strip()
    if len(s) == 3 and s[0] == s[2] == '"':
        return s[1]

    alternatives = []
    for alt in s.split(" | "):
        try:
            alternatives.append([int(part) for part in alt.split()])
        except ValueError as err:
            raise ValueError(f"bad rule: {s}") from err
        if not alternatives[-1]:
            raise ValueError(f"bad rule: {s}")
    return alternatives


def parse_rules(s: str) -> Rules:
    rules: Rules = {}
    for line in s.splitlines():
        if not line.strip():
            continue
        idx, sep, body = line.partition(": ")
        if not sep:
            raise ValueError(f"bad rule line: {line}")
        rules[int(idx)] = parse_rule(body)
    return rules


def parse_input(text: str) -> Tuple[Rules, List[str]]:
    rules_str, sep, messages = text.partition("\n\n")
    if not sep:
        raise ValueError("expected rules and messages separated by a blank line")
    return parse_rules(rules_str), messages.split()


class RegexBuilder:
    """Compiles rules to regex source, memoised per rule id."""

    def __init__(self, rules: Rules, loops: bool = False, max_depth: int = 1):
        self.rules = rules
        self.loops = loops
        self.max_depth = max_depth
        self.regexes: Dict[int, str] = {}

    def build(self, rule_id: int) -> str:
        if rule_id in self.regexes:
            return self.regexes[rule_id]
        if rule_id not in self.rules:
            raise ValueError(f"empty rule: id: {rule_id}")

        if self.loops and rule_id == LOOP_8:
            regex = f"(?:{self.build(RULE_42)})+"
        elif self.loops and rule_id == LOOP_11:
            r42 = self.build(RULE_42)
            r31 = self.build(RULE_31)
            # (r42){1}(r31){1} | (r42){2}(r31){2} | ...
            cases = "|".join(
                f"(?:{r42}){{{i}}}(?:{r31}){{{i}}}"
                for i in range(1, self.max_depth + 1)
            )
            regex = f"(?:{cases})"
        else:
            rule = self.rules[rule_id]
            if isinstance(rule, str):
                regex = re.escape(rule)
            else:
                alts = ["".join(self.build(i) for i in seq) for seq in rule]
                regex = alts[0] if len(alts) == 1 else "(?:" + "|".join(alts) + ")"

        self.regexes[rule_id] = regex
        return regex


def min_match_len(rules: Rules, rule_id: int, memo: Optional[Dict[int, int]] = None) -> int:
    """Length of the shortest string a (loop-free) rule matches."""
    if memo is None:
        memo = {}
    if rule_id not in memo:
        rule = rules[rule_id]
        if isinstance(rule, str):
            memo[rule_id] = len(rule)
        else:
            memo[rule_id] = min(
                sum(min_match_len(rules, i, memo) for i in seq) for seq in rule
            )
    return memo[rule_id]


def loop_depth(rules: Rules, messages: List[str]) -> int:
    """Deepest nesting of rule 11 any message could need."""
    if RULE_42 not in rules or RULE_31 not in rules:
        raise ValueError(f"looping rules need rules {RULE_42} and {RULE_31}")
    longest = max((len(m) for m in messages), default=0)
    min42 = min_match_len(rules, RULE_42)
    min31 = min_match_len(rules, RULE_31)
    return max(1, (longest - min42) // (min42 + min31))


def count_matching(rules: Rules, messages: List[str], loops: bool = False) -> int:
    """
    Count messages fully matching rule 0.

    With loops, rules 8 and 11 take their looping forms; a grammar without
    both of them has nothing to loop and matches as without loops.
    """
    if loops and not (LOOP_8 in rules and LOOP_11 in rules):
        logging.info(f"rules {LOOP_8} and {LOOP_11} not both present, matching without loops")
        loops = False

    max_depth = loop_depth(rules, messages) if loops else 1
    builder = RegexBuilder(rules, loops=loops, max_depth=max_depth)

    source = timed("build_regexes", builder.build, 0)
    base_regex = re.compile(source, re.ASCII)

    with Timer("match"):
        num_matching = sum(1 for line in messages if base_regex.fullmatch(line))

    logging.info(f"loops={loops}, max_depth={max_depth}, matching={num_matching}")
    return num_matching


def run(args: List[str]) -> Tuple[int, int]:
    rules, messages = parse_input(read_file_text(args[0]))

    # part 1
    answer1 = timed("part1", count_matching, rules, messages)

    # part 2
    answer2 = timed("part2", count_matching, rules, messages, loops=True)

    return answer1, answer2
