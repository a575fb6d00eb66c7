"""
Command Dispatcher

Maps a day name to that day's run() entry point and passes the remaining
arguments through unchanged. Each day reads its own input file, prints
nothing but diagnostics, and returns its two answers; the dispatcher
prints the answers and optionally appends a JSONL receipt.

CLI:
  python -m aoc.solve day1 inputs/day1.txt
  python -m aoc.solve day9 inputs/day9.txt 25
  python -m aoc.solve day13 inputs/day13.txt --receipts outputs/receipts.jsonl
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from aoc import (
    day1, day2, day3, day4, day5, day6, day7, day8, day9, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19,
)
from aoc.receipts import append_receipt, build_answer_receipt, sha256_bytes
from aoc.timer import Timer
from aoc.util import read_file_bytes

Answers = Tuple[Any, Any]

DAYS: Dict[str, Callable[[List[str]], Answers]] = {
    "day1": day1.run,
    "day2": day2.run,
    "day3": day3.run,
    "day4": day4.run,
    "day5": day5.run,
    "day6": day6.run,
    "day7": day7.run,
    "day8": day8.run,
    "day9": day9.run,
    "day10": day10.run,
    "day11": day11.run,
    "day12": day12.run,
    "day13": day13.run,
    "day14": day14.run,
    "day15": day15.run,
    "day16": day16.run,
    "day17": day17.run,
    "day18": day18.run,
    "day19": day19.run,
}


def run_day(
    day: str,
    day_args: List[str],
    receipts_path: Optional[Path] = None,
) -> Answers:
    """
    Run one day and print its answers.

    Args:
        day: Day name, a key of DAYS
        day_args: Arguments passed through to the day; day_args[0] is the input path
        receipts_path: Optional JSONL file to append a receipt to

    Returns:
        (part1, part2) answers
    """
    if day not in DAYS:
        raise ValueError(f"unrecognized command: '{day}'")

    with Timer("command") as timer:
        part1, part2 = DAYS[day](day_args)

    print(f"part 1: {part1}")
    print(f"part 2: {part2}")

    if receipts_path is not None:
        input_sha256 = sha256_bytes(read_file_bytes(day_args[0]))
        receipt = build_answer_receipt(
            day=day,
            input_path=day_args[0],
            input_sha256=input_sha256,
            part1=part1,
            part2=part2,
            elapsed_s=timer.elapsed,
        )
        append_receipt(receipts_path, receipt)
        logging.info(f"Wrote receipt for {day} to {receipts_path}")

    return part1, part2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Advent of Code 2020 solvers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "day",
        type=str,
        choices=list(DAYS),
        help="Day to run: day1 .. day19",
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Path to the puzzle input file",
    )

    parser.add_argument(
        "extra",
        nargs="*",
        help="Extra arguments passed through to the day unchanged",
    )

    parser.add_argument(
        "--receipts",
        type=Path,
        help="Append a JSONL answer receipt to this file",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point with argparse."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    args = build_parser().parse_args(argv)

    if not args.input.exists():
        logging.error(f"Input file not found: {args.input}")
        raise SystemExit(1)

    day_args = [str(args.input), *args.extra]
    logging.info(f"{args.day} {day_args}")

    run_day(args.day, day_args, receipts_path=args.receipts)


if __name__ == "__main__":
    main()
