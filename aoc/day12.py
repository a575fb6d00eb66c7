"""
Day 12: Rain Risk

Positions and headings are complex numbers (east = +1, north = +1j), so a
left turn by 90 degrees is multiplication by 1j and a right turn by its
cube.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from aoc.util import read_file_text

NORTH = 1j
SOUTH = -1j
EAST = 1 + 0j
WEST = -1 + 0j

TRANSLATIONS = {"N": NORTH, "S": SOUTH, "E": EAST, "W": WEST}
LEFT_TURNS = {90: 1j, 180: -1 + 0j, 270: -1j}

# (kind, value): kind is "forward", "translate" or "rotate"
Action = Tuple[str, complex]


def heading_from_degree(degree: int, right: bool) -> complex:
    if degree not in LEFT_TURNS:
        raise ValueError(f"invalid degree: {degree}")
    left_heading = LEFT_TURNS[degree]
    # 3 lefts make a right
    return left_heading ** 3 if right else left_heading


def parse_action(s: str) -> Action:
    action, value = s[:1], s[1:]
    try:
        value = int(value)
    except ValueError as err:
        raise ValueError(f"invalid value: {s!r}") from err

    if action in TRANSLATIONS:
        return "translate", TRANSLATIONS[action] * value
    if action == "F":
        return "forward", complex(value)
    if action in ("L", "R"):
        return "rotate", heading_from_degree(value, right=(action == "R"))
    raise ValueError(f"invalid action: {action}")


def manhattan_distance(z: complex) -> int:
    return int(abs(z.real) + abs(z.imag))


@dataclass
class Ship:
    """The ship moves itself and turns its own heading."""

    position: complex = 0j
    heading: complex = EAST

    def apply_action(self, action: Action) -> "Ship":
        kind, value = action
        if kind == "forward":
            self.position += self.heading * value
        elif kind == "translate":
            self.position += value
        else:
            self.heading *= value
        return self


@dataclass
class WaypointShip:
    """Actions move and rotate a waypoint relative to the ship."""

    position: complex = 0j
    waypoint: complex = 10 * EAST + 1 * NORTH

    def apply_action(self, action: Action) -> "WaypointShip":
        kind, value = action
        if kind == "forward":
            self.position += self.waypoint * value
        elif kind == "translate":
            self.waypoint += value
        else:
            self.waypoint *= value
        return self


def navigate(ship, actions: List[Action]) -> int:
    for action in actions:
        ship.apply_action(action)
    logging.info(f"{ship}")
    return manhattan_distance(ship.position)


def run(args: List[str]) -> Tuple[int, int]:
    actions = [parse_action(line) for line in read_file_text(args[0]).split()]
    return navigate(Ship(), actions), navigate(WaypointShip(), actions)
