"""
Advent of Code 2020 Solvers
Independent daily puzzle solvers behind a single command-line dispatcher.

Modules:
- solve: CLI dispatcher mapping a day name to its run() entry point
- timer: scoped wall-time measurement logged on scope exit
- util: file reading helpers
- receipts: SHA256 + JSONL answer receipt writer
- day1 .. day19: one solver per puzzle day
"""

__version__ = "0.1.0"
