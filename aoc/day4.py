"""
Day 4: Passport Processing

Passports are blank-line separated groups of ``key:value`` fields.

  - v1: all required fields are present (cid is optional)
  - v2: all required fields are present and each value is valid
"""

import logging
import re
from dataclasses import dataclass, fields
from typing import Dict, List, Optional, Tuple

from aoc.util import read_file_text, split_blocks

REQUIRED_FIELDS = ("byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid")
KNOWN_FIELDS = REQUIRED_FIELDS + ("cid",)

EYE_COLORS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
HAIR_COLOR_RE = re.compile(r"#[0-9a-f]{6}")
PASSPORT_ID_RE = re.compile(r"[0-9]{9}")


def parse_raw(s: str) -> Dict[str, str]:
    """
    Parse one passport block into a field dict.

    Raises:
        ValueError: On a field that is not ``key:value`` or an unknown key
    """
    passport: Dict[str, str] = {}
    for field in s.split():
        parts = field.split(':')
        if len(parts) != 2:
            raise ValueError(f"Invalid field: {s}")
        key, value = parts
        if key not in KNOWN_FIELDS:
            raise ValueError(f"Invalid field name: {key}")
        passport[key] = value
    return passport


@dataclass(frozen=True)
class PassportV1:
    byr: str
    iyr: str
    eyr: str
    hgt: str
    hcl: str
    ecl: str
    pid: str

    @classmethod
    def from_raw(cls, raw: Dict[str, str]) -> Optional["PassportV1"]:
        """Return a passport if every required field is present, else None."""
        if any(name not in raw for name in REQUIRED_FIELDS):
            return None
        return cls(**{f.name: raw[f.name] for f in fields(cls)})


def parse_num_range(s: str, lo: int, hi: int) -> int:
    if not s.isdigit():
        raise ValueError(f"not a number: {s!r}")
    num = int(s)
    if not lo <= num <= hi:
        raise ValueError(f"value out of range: {num}")
    return num


def parse_height(s: str) -> Tuple[int, str]:
    if s.endswith("in"):
        return parse_num_range(s[:-2], 59, 76), "in"
    if s.endswith("cm"):
        return parse_num_range(s[:-2], 150, 193), "cm"
    raise ValueError("invalid height units")


def parse_hair_color(s: str) -> str:
    if not HAIR_COLOR_RE.fullmatch(s):
        raise ValueError("Invalid hair color")
    return s


def parse_eye_color(s: str) -> str:
    if s not in EYE_COLORS:
        raise ValueError("Invalid eye color")
    return s


def parse_passport_id(s: str) -> str:
    if not PASSPORT_ID_RE.fullmatch(s):
        raise ValueError("Invalid passport id")
    return s


def is_valid_v2(passport: PassportV1) -> bool:
    """Check every field of a complete passport against its rule."""
    try:
        parse_num_range(passport.byr, 1920, 2002)
        parse_num_range(passport.iyr, 2010, 2020)
        parse_num_range(passport.eyr, 2020, 2030)
        parse_height(passport.hgt)
        parse_hair_color(passport.hcl)
        parse_eye_color(passport.ecl)
        parse_passport_id(passport.pid)
    except ValueError:
        return False
    return True


def count_valid(text: str) -> Tuple[int, int]:
    valid_count_v1 = 0
    valid_count_v2 = 0
    for block in split_blocks(text):
        passport = PassportV1.from_raw(parse_raw(block))
        if passport is not None:
            valid_count_v1 += 1
            valid_count_v2 += is_valid_v2(passport)
    return valid_count_v1, valid_count_v2


def run(args: List[str]) -> Tuple[int, int]:
    valid_count_v1, valid_count_v2 = count_valid(read_file_text(args[0]))
    logging.info(f"valid_count_v1={valid_count_v1}, valid_count_v2={valid_count_v2}")
    return valid_count_v1, valid_count_v2
