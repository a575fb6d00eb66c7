"""
File reading helpers shared by every day.

Each day reads exactly one puzzle input file into memory and parses it
locally; these helpers only cover reading and the two line/group splits
that most inputs share.
"""

from pathlib import Path
from typing import Iterator, List, Union

NEWLINE = b"\n"

PathLike = Union[str, Path]


def read_file_bytes(path: PathLike) -> bytes:
    """
    Read an entire file into memory.

    Args:
        path: Path to the puzzle input

    Returns:
        Raw file contents

    Raises:
        OSError: With a context message if the file cannot be opened or read
    """
    path = Path(path)
    try:
        f = open(path, 'rb')
    except OSError as err:
        raise OSError(f"Failed to open file: {path}") from err

    with f:
        try:
            return f.read()
        except OSError as err:
            raise OSError(f"Failed to read file: {path}") from err


def read_file_text(path: PathLike) -> str:
    """Read an entire file as UTF-8 text."""
    data = read_file_bytes(path)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as err:
        raise ValueError(f"File not valid utf8: {path}") from err


def split_bytes_lines(data: bytes) -> Iterator[bytes]:
    """
    Split a byte buffer into newline-delimited lines.

    Iteration stops at the first empty piece, so a trailing newline (or a
    blank line) ends the stream.
    """
    for piece in data.split(NEWLINE):
        if not piece:
            return
        yield piece


def split_blocks(text: str) -> List[str]:
    """Split text into blank-line separated groups, dropping empty groups."""
    return [block for block in text.split("\n\n") if block.strip()]
