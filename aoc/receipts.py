"""
Answer Receipts Schema + Writer

Helpers for recording solver runs in JSONL format.
Each line is a complete JSON object representing one day's run: which
input it read (by path and SHA256), the two answers and the elapsed time.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional


def sha256_bytes(data: bytes) -> str:
    """SHA256 hex digest of raw input bytes."""
    return hashlib.sha256(data).hexdigest()


def _jsonable(value: Any) -> Any:
    # Answers are ints or strings; anything else is recorded by repr
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


def build_answer_receipt(
    day: str,
    input_path: str,
    input_sha256: str,
    part1: Any,
    part2: Any,
    elapsed_s: float,
) -> Dict[str, Any]:
    """
    Build a receipt dict for a single day run.

    Args:
        day: Day name (e.g., "day13")
        input_path: Path of the puzzle input as given on the command line
        input_sha256: SHA256 hash of the input bytes
        part1, part2: Computed answers
        elapsed_s: Wall time of the run in seconds

    Returns:
        Complete receipt dict
    """
    return {
        "day": day,
        "input_path": str(input_path),
        "input_sha256": input_sha256,
        "part1": _jsonable(part1),
        "part2": _jsonable(part2),
        "elapsed_s": round(elapsed_s, 6),
    }


def append_receipt(receipts_path: Path, receipt: Dict[str, Any]) -> None:
    """
    Append one receipt to a JSONL file, creating the file and its parent
    directory if needed. Repeated runs accumulate in the same file.
    """
    receipts_path = Path(receipts_path)
    receipts_path.parent.mkdir(parents=True, exist_ok=True)
    line = json.dumps(receipt, sort_keys=True, ensure_ascii=False)
    with open(receipts_path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


def read_receipts(receipts_path: Path) -> List[Dict[str, Any]]:
    """All receipts in file order; blank lines are skipped."""
    text = Path(receipts_path).read_text(encoding="utf-8")
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def find_receipt(receipts_path: Path, day: str) -> Optional[Dict[str, Any]]:
    """
    Find the most recent receipt for a day.

    Args:
        receipts_path: Path to receipts.jsonl
        day: Day name

    Returns:
        Receipt dict if found, None otherwise
    """
    for receipt in reversed(read_receipts(receipts_path)):
        if receipt.get("day") == day:
            return receipt
    return None
