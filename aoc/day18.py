"""
Day 18: Operation Order

Evaluate arithmetic with + and * and parentheses under non-standard
precedence, by precedence climbing over a token list:

  - v1: + and * bind equally, evaluated left to right
  - v2: + binds tighter than *
"""

import logging
import re
from typing import Dict, List, Tuple

from aoc.util import read_file_text

TOKEN_RE = re.compile(r"\s*(?:(\d+)|(.))")

PRECEDENCE_V1: Dict[str, int] = {"+": 1, "*": 1}
PRECEDENCE_V2: Dict[str, int] = {"+": 2, "*": 1}

Token = str


def tokenize(s: str) -> List[Token]:
    tokens = []
    for num, op in TOKEN_RE.findall(s):
        if num:
            tokens.append(num)
        elif op in "+*()":
            tokens.append(op)
        elif not op.isspace():
            raise ValueError(f"unexpected character: {op!r}")
    return tokens


class _Parser:
    def __init__(self, tokens: List[Token], precedence: Dict[str, int]):
        self.tokens = tokens
        self.pos = 0
        self.precedence = precedence

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def next(self) -> Token:
        token = self.peek()
        if token is None:
            raise ValueError("unexpected end of expression")
        self.pos += 1
        return token

    def atom(self) -> int:
        token = self.next()
        if token == "(":
            value = self.expr(0)
            if self.next() != ")":
                raise ValueError("no matching rparen")
            return value
        if token.isdigit():
            return int(token)
        raise ValueError(f"unexpected token: {token!r}")

    def expr(self, min_prec: int) -> int:
        left = self.atom()
        while True:
            op = self.peek()
            if op not in self.precedence or self.precedence[op] < min_prec:
                return left
            self.pos += 1
            # left-associative: the right side only takes tighter operators
            right = self.expr(self.precedence[op] + 1)
            left = left + right if op == "+" else left * right


def evaluate(s: str, precedence: Dict[str, int]) -> int:
    parser = _Parser(tokenize(s), precedence)
    value = parser.expr(0)
    if parser.peek() is not None:
        raise ValueError(f"unexpected token: {parser.peek()!r}")
    return value


def eval_str_v1(s: str) -> int:
    return evaluate(s, PRECEDENCE_V1)


def eval_str_v2(s: str) -> int:
    return evaluate(s, PRECEDENCE_V2)


def run(args: List[str]) -> Tuple[int, int]:
    lines = [line for line in read_file_text(args[0]).splitlines() if line.strip()]

    total_v1 = sum(eval_str_v1(line) for line in lines)
    total_v2 = sum(eval_str_v2(line) for line in lines)

    logging.info(f"expressions={len(lines)}, total_v1={total_v1}, total_v2={total_v2}")
    return total_v1, total_v2
