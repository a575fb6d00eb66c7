"""
Scoped timer.

Wraps a block of work and logs its elapsed wall time when the block exits,
whether it returns normally or an exception unwinds through it:

    with Timer("part 1"):
        answer = part1(data)

    answer = timed("part 1", part1, data)

Lines are logged at INFO level as ``[file:line] label: time elapsed 1.234ms``
where ``file:line`` is where the timer was created.
"""

import inspect
import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional


def format_elapsed(seconds: float) -> str:
    """Format a duration with the largest unit that keeps it above 1."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.0f}ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1.0:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


class Timer:
    """
    Context manager logging elapsed time on exit.

    The caller's file name and line number are captured at construction so
    the log line points at the timed block rather than at this module.
    """

    def __init__(self, label: str = "block", _stacklevel: int = 1):
        frame = inspect.currentframe()
        for _ in range(_stacklevel):
            frame = frame.f_back
        self.file = Path(frame.f_code.co_filename).name
        self.line = frame.f_lineno
        self.label = label
        self.start: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start
        logging.info(
            f"[{self.file}:{self.line}] {self.label}: "
            f"time elapsed {format_elapsed(self.elapsed)}"
        )
        # Never suppress the exception
        return False


def timed(label: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Run func(*args, **kwargs) under a Timer and return its result.

    Args:
        label: Label for the log line
        func: Callable to time

    Returns:
        Whatever func returns
    """
    with Timer(label, _stacklevel=2):
        return func(*args, **kwargs)
